"""Construction options for LayeredConfig, loadable from YAML."""

from __future__ import annotations

import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, field_validator

from layerconf.errors import ConfigError, ConfigNotFoundError
from layerconf.path import DEFAULT_DELIMITER

__all__ = ["ConfigOptions"]


class ConfigOptions(BaseModel):
    """Recognized construction options.

    Attributes:
        path: Directory holding defaults files. Resolved when the config is built.
        namespace: Prefix for store keys. None disables prefixing and the
            namespace file.
        delimiter: Path separator.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str
    namespace: str | None = None
    delimiter: str = Field(default=DEFAULT_DELIMITER, min_length=1)

    @field_validator("path")
    @classmethod
    def _path_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path must not be blank")
        return value

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> ConfigOptions:
        """Validate a plain mapping, raising ConfigError on bad fields."""
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            errors = [
                {"field": ".".join(str(loc) for loc in err.get("loc", ())), "message": err.get("msg", "")}
                for err in e.errors()
            ]
            raise ConfigError(
                message=f"Invalid config options: {e.error_count()} error(s)",
                details={"errors": errors},
                cause=e,
            ) from e

    @classmethod
    def load(cls, yaml_path: str) -> ConfigOptions:
        """Load options from a YAML file.

        A relative ``path`` inside the file is taken relative to the file's
        own directory.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is malformed or the fields are invalid.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if not isinstance(data, dict):
            raise ConfigError(f"Options file must be a mapping, got {type(data).__name__}")

        path = data.get("path")
        if isinstance(path, str) and path.strip() and not os.path.isabs(path):
            data = {**data, "path": os.path.join(os.path.dirname(os.path.abspath(yaml_path)), path)}

        return cls.from_mapping(data)

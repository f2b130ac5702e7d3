"""Error hierarchy for layerconf."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "LayerConfError",
    "ConfigNotFoundError",
    "ConfigError",
    "ConfigFileError",
    "StoreValueError",
    "ErrorCodes",
]


class LayerConfError(Exception):
    """Base error for all layerconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(LayerConfError):
    """Raised when a configuration path cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Config path does not exist: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path that could not be resolved."""
        return self.details["config_path"]


class ConfigError(LayerConfError):
    """Raised when configuration options are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ConfigFileError(LayerConfError):
    """Raised when a defaults file cannot be read or parsed."""

    def __init__(self, *, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_FILE_INVALID",
            message=f"Invalid config file '{file_path}': {reason}",
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )

    @property
    def file_path(self) -> str:
        """The file that failed to load."""
        return self.details["file_path"]


class StoreValueError(LayerConfError):
    """Raised when a persisted value cannot be converted to or from its stored form."""

    def __init__(self, message: str, key: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="STORE_VALUE_INVALID",
            message=message,
            details={"key": key},
            **kwargs,
        )

    @property
    def key(self) -> str | None:
        """The store key holding the bad value, when known."""
        return self.details["key"]


class ErrorCodes:
    """All layerconf error codes as constants.

    Example:
        if error.code == ErrorCodes.STORE_VALUE_INVALID:
            reset_option()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_FILE_INVALID = "CONFIG_FILE_INVALID"
    STORE_VALUE_INVALID = "STORE_VALUE_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")

"""Shared fixtures for the layerconf test suite."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from store_helpers import CountingLoader, CountingStore


@pytest.fixture
def store() -> CountingStore:
    """An empty call-recording store."""
    return CountingStore()


@pytest.fixture
def loader() -> CountingLoader:
    """A call-recording YAML loader."""
    return CountingLoader()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A defaults tree::

        mail.yaml            {smtp: {host: localhost, port: 25}, from: noreply@example.com}
        lists.yaml           {servers: [alpha, beta], 0: zero}
        services/
            cache.yaml       {ttl: 60, backend: redis}
            db/
                primary.yml  {host: db1, port: 5432}
    """
    root = tmp_path / "config"
    root.mkdir()
    (root / "mail.yaml").write_text(
        yaml.dump({"smtp": {"host": "localhost", "port": 25}, "from": "noreply@example.com"})
    )
    (root / "lists.yaml").write_text(yaml.dump({"servers": ["alpha", "beta"], 0: "zero"}))
    services = root / "services"
    services.mkdir()
    (services / "cache.yaml").write_text(yaml.dump({"ttl": 60, "backend": "redis"}))
    db = services / "db"
    db.mkdir()
    (db / "primary.yml").write_text(yaml.dump({"host": "db1", "port": 5432}))
    return root


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """A defaults directory with no files."""
    root = tmp_path / "empty"
    root.mkdir()
    return root

"""Example: mailer settings with file defaults and SQLite-persisted overrides."""

from __future__ import annotations

import pathlib
import sys

from layerconf import LayeredConfig, SqliteStore

CONFIG_DIR = pathlib.Path(__file__).resolve().parent / "config"


def open_settings(db_path: str | pathlib.Path) -> LayeredConfig:
    """Open the mailer settings. Callers must close() the result, or use ``with``."""
    return LayeredConfig(CONFIG_DIR, namespace="mailer", store=SqliteStore(db_path))


def use_port(db_path: str | pathlib.Path, port: int) -> dict:
    """Persist a new SMTP port and return the effective SMTP settings."""
    with open_settings(db_path) as settings:
        settings.set("smtp.port", port)
        return settings.get("smtp")


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print("usage: settings.py DB_PATH", file=sys.stderr)
        return 2
    with open_settings(argv[1]) as settings:
        print("sender:", settings.get("sender.address"))
        print("smtp:", settings.get("smtp.host"), settings.get("smtp.port"))
        print("welcome subject:", settings.get("templates.welcome", {}).get("subject"))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

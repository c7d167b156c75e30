"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/PomoConfig/settings.json

Usage::

    settings = load_settings()
    settings.storage_backend = "memory"
    save_settings(settings)

These are host settings (where the timer configuration lives, how
much to log), not the timer configuration itself.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields

from .database.db import APP_SUPPORT_DIR

logger = logging.getLogger(__name__)

# settings.json sits beside the database file
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

STORAGE_BACKENDS = ("sqlite", "memory")


@dataclass
class Settings:
    """Host preferences."""

    # ── storage ───────────────────────────────────────────────────────
    storage_backend: str = "sqlite"        # sqlite | memory
    database_url: str | None = None        # None → sqlite file in APP_SUPPORT_DIR

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_to_file: bool = True


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )

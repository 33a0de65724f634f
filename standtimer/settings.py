"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/StandTimer/settings.json

Usage::

    settings = load_settings()
    settings.auto_restart_seconds = 5 * 60
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)

# Reuse the app-support directory from storage/db.py
APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "StandTimer"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

VIEW_TIMER_AND_LOGS = "timer_and_logs"
VIEW_COMPACT = "compact"

# (label, seconds); ``None`` switches auto-restart off
AUTO_RESTART_PRESETS: tuple[tuple[str, int | None], ...] = (
    ("Off", None),
    ("5 min", 5 * 60),
    ("10 min", 10 * 60),
    ("15 min", 15 * 60),
    ("30 min", 30 * 60),
)


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    total_seconds: int = 60 * 60
    pre_alert_seconds: int = 10 * 60
    auto_restart_seconds: int | None = None

    # ── window ────────────────────────────────────────────────────────
    view_mode: str = VIEW_TIMER_AND_LOGS


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    try:
        if SETTINGS_PATH.exists():
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except Exception as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )

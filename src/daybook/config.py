"""Configuration management for daybook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.active import DEFAULT_ACTIVE_HOUR
from .core.agenda import DEFAULT_LABEL_FORMAT
from .core.navigation import DEFAULT_WEEK_START, InvalidRangeUnit, RangeUnit, parse_weekday

logger = logging.getLogger(__name__)

DAYBOOK_HOME = Path(os.environ.get("DAYBOOK_HOME", Path.home() / "daybook"))
CONFIG_FILE = DAYBOOK_HOME / "config" / "daybook.conf"
DATA_DIR = DAYBOOK_HOME / "data"


@dataclass
class Config:
    """daybook configuration."""

    notes_api_url: str = ""
    notes_file: str = ""
    timezone: str = "local"
    week_start: int = DEFAULT_WEEK_START
    default_range: RangeUnit = RangeUnit.DAY
    default_active_hour: int = DEFAULT_ACTIVE_HOUR
    label_format: str = DEFAULT_LABEL_FORMAT
    refresh_seconds: int = 60
    event_kind: str = "event"

    @property
    def notes_path(self) -> Path:
        if self.notes_file:
            return Path(self.notes_file).expanduser()
        return DATA_DIR / "notes.json"


def _parse_int(key: str, value: str, default: int, low: int, high: int) -> int:
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}")
        return default
    if not low <= number <= high:
        logger.warning(f"{key.upper()} must be within {low}..{high}, got {number}")
        return default
    return number


def load_config() -> Config:
    """Load configuration from daybook.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "notes_api_url":
                config.notes_api_url = value
            case "notes_file":
                config.notes_file = value
            case "timezone":
                config.timezone = value or config.timezone
            case "week_start":
                try:
                    config.week_start = parse_weekday(value)
                except ValueError as e:
                    logger.warning(f"Ignoring WEEK_START: {e}")
            case "default_range":
                try:
                    config.default_range = RangeUnit.parse(value)
                except InvalidRangeUnit as e:
                    logger.warning(f"Ignoring DEFAULT_RANGE: {e}")
            case "default_active_hour":
                config.default_active_hour = _parse_int(key, value, config.default_active_hour, 0, 23)
            case "label_format":
                config.label_format = value or config.label_format
            case "refresh_seconds":
                config.refresh_seconds = _parse_int(key, value, config.refresh_seconds, 1, 86400)
            case "event_kind":
                config.event_kind = value or config.event_kind
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config

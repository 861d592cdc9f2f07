"""Configuration management for icaltext."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from icaltext.core.folding import ParseMode

logger = logging.getLogger(__name__)

ICALTEXT_HOME = Path(os.environ.get("ICALTEXT_HOME", Path.home() / ".icaltext"))
CONFIG_FILE = ICALTEXT_HOME / "config" / "icaltext.conf"

DEFAULT_DATE_PROPERTIES = [
    "DTSTART",
    "DTEND",
    "DUE",
    "DTSTAMP",
    "CREATED",
    "LAST-MODIFIED",
    "COMPLETED",
    "RECURRENCE-ID",
]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """icaltext configuration."""

    parse_mode: ParseMode = ParseMode.LOOSE
    # Property names read as DATE / DATE-TIME values
    date_properties: list[str] = field(default_factory=lambda: list(DEFAULT_DATE_PROPERTIES))
    skip_invalid: bool = False
    log_level: str = "WARNING"


def _parse_bool(key: str, value: str, default: bool) -> bool:
    match value.lower():
        case "true" | "yes" | "1" | "on":
            return True
        case "false" | "no" | "0" | "off":
            return False
    logger.warning(f"Invalid boolean for {key}: {value!r}")
    return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from icaltext.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"'):
            end_quote = value.find('"', 1)
            if end_quote != -1:
                value = value[1:end_quote]
            else:
                value = value[1:]
        elif value.startswith("'"):
            end_quote = value.find("'", 1)
            if end_quote != -1:
                value = value[1:end_quote]
            else:
                value = value[1:]
        else:
            # Unquoted: strip inline comments
            if "#" in value:
                value = value.split("#")[0].strip()

        match key:
            case "parse_mode":
                try:
                    config.parse_mode = ParseMode(value.lower())
                except ValueError:
                    logger.warning(f"Unknown PARSE_MODE {value!r}, using {config.parse_mode.value}")
            case "date_properties":
                config.date_properties = [p.strip().upper() for p in value.split(",") if p.strip()]
            case "skip_invalid":
                config.skip_invalid = _parse_bool(key, value, config.skip_invalid)
            case "log_level":
                if value.upper() in LOG_LEVELS:
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Unknown LOG_LEVEL {value!r}, using {config.log_level}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config

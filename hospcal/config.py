"""Configuration management."""

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from hospcal.errors import ConfigError
from hospcal.models import MONDAY, SUNDAY

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "hospcal" / "config.ini"

WEEK_STARTS = {"sunday": SUNDAY, "monday": MONDAY}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def parse_week_start(value: str) -> str:
    """Validate a week start name such as "sunday"."""
    normalized = value.strip().lower()
    if normalized not in WEEK_STARTS:
        msg = f"weekStart must be one of {', '.join(WEEK_STARTS)}, got {value!r}"
        raise ConfigError(msg)
    return normalized


def parse_log_level(value: str) -> str:
    """Validate a logging level name."""
    normalized = value.strip().upper()
    if normalized not in LOG_LEVELS:
        msg = f"logLevel must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
        raise ConfigError(msg)
    return normalized


@dataclass
class Config:
    """Calendar display configuration."""

    week_start: str = "sunday"
    log_level: str = "WARNING"

    @property
    def first_weekday(self) -> int:
        """Weekday number the calendar grid starts on (0 = Sunday)."""
        return WEEK_STARTS[self.week_start]

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        week_start = os.environ.get("HOSPCAL_WEEK_START")
        log_level = os.environ.get("HOSPCAL_LOG_LEVEL")
        if week_start is None and log_level is None:
            return None
        return cls(
            week_start=parse_week_start(week_start or cls.week_start),
            log_level=parse_log_level(log_level or cls.log_level),
        )

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            msg = f"Could not parse {path}: {e}"
            raise ConfigError(msg) from e

        if not config.has_section("display"):
            logger.warning("No [display] section in %s, using defaults", path)
            return cls()
        section = config["display"]
        return cls(
            week_start=parse_week_start(section.get("weekStart", cls.week_start)),
            log_level=parse_log_level(section.get("logLevel", cls.log_level)),
        )

    @classmethod
    def resolve(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config":
        """Environment first, then the config file, then defaults."""
        return cls.from_env() or cls.load(path) or cls()

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["display"] = {
            "weekStart": self.week_start,
            "logLevel": self.log_level,
        }
        with path.open("w", encoding="utf-8") as config_file:
            config.write(config_file)
        logger.info("Saved configuration to %s", path)

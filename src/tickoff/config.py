"""Configuration management for tickoff."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

TICKOFF_HOME = Path(os.environ.get("TICKOFF_HOME", Path.home() / "tickoff"))
CONFIG_FILE = TICKOFF_HOME / "config" / "tickoff.conf"
DATA_DIR = TICKOFF_HOME / "data"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """tickoff configuration."""

    data_dir: Path = field(default_factory=lambda: DATA_DIR)
    storage_key: str = "tasks"
    log_level: str = "WARNING"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from tickoff.conf file."""
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
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                if value:
                    config.data_dir = Path(value).expanduser()
            case "storage_key":
                if value:
                    config.storage_key = value
            case "log_level":
                if value.upper() in LOG_LEVELS:
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Invalid LOG_LEVEL: {value}")
            case _:
                logger.warning(f"Unknown config key: {key}")

    return config

"""Configuration management for Daybook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DAYBOOK_HOME = Path(os.environ.get("DAYBOOK_HOME", Path.home() / ".daybook"))
CONFIG_FILE = DAYBOOK_HOME / "daybook.conf"
DATA_DIR = DAYBOOK_HOME / "data"


@dataclass
class Config:
    """Daybook configuration."""

    data_dir: str = ""
    pomodoro_minutes: int = 25
    log_level: str = "WARNING"


def _strip_value(value: str) -> str:
    """Remove surrounding quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daybook.conf file."""
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
        value = _strip_value(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "pomodoro_minutes":
                try:
                    config.pomodoro_minutes = int(value)
                except ValueError:
                    logger.warning(f"Invalid POMODORO_MINUTES value: {value!r}")
            case "log_level":
                config.log_level = value.upper()

    return config


def get_data_dir(config: Config) -> Path:
    """Resolve the data directory from config, creating it if needed."""
    data_dir = Path(config.data_dir).expanduser() if config.data_dir else DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir

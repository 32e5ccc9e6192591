"""Configuration management for Tasks To Go."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TOGO_HOME = Path(os.environ.get("TOGO_HOME", Path.home() / "togo"))
CONFIG_FILE = TOGO_HOME / "config" / "togo.conf"
DATA_DIR = TOGO_HOME / "data"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Config:
    """Tasks To Go configuration."""

    data_dir: str = ""
    log_level: str = "WARNING"

    @property
    def resolved_data_dir(self) -> Path:
        """Configured data directory, or the default under TOGO_HOME."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _strip_value(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from togo.conf file."""
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
            case "log_level":
                level = value.upper()
                if level in LOG_LEVELS:
                    config.log_level = level
                else:
                    logger.warning(f"Ignoring unknown LOG_LEVEL: {value}")

    return config

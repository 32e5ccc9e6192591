"""Display preferences: dark mode and font size."""

import json
import logging
import math
from dataclasses import dataclass

from .ports.kv_store import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

DARK_MODE_KEY = "darkMode"
FONT_SIZE_KEY = "fontSize"

MIN_FONT_SIZE = 12
MAX_FONT_SIZE = 24
DEFAULT_FONT_SIZE = 16


def clamp_font_size(value: float) -> int:
    """Round to the nearest whole step and clamp into the allowed range."""
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, int(round(value))))


@dataclass
class Preferences:
    """Cosmetic settings handed to the presentation layer."""

    dark_mode: bool = False
    font_size: int = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        self.font_size = clamp_font_size(self.font_size)

    def set_font_size(self, value: float) -> None:
        self.font_size = clamp_font_size(value)

    def save(self, kv: KeyValueStore) -> None:
        """Save both preferences under their own keys (two separate writes)."""
        kv.set(FONT_SIZE_KEY, json.dumps(self.font_size).encode("utf-8"))
        kv.set(DARK_MODE_KEY, json.dumps(self.dark_mode).encode("utf-8"))

    @classmethod
    def load(cls, kv: KeyValueStore) -> "Preferences":
        """Load preferences, falling back to defaults for anything unreadable."""
        prefs = cls()

        dark = _read_json(kv, DARK_MODE_KEY)
        if isinstance(dark, bool):
            prefs.dark_mode = dark
        elif dark is not None:
            logger.warning(f"Ignoring invalid {DARK_MODE_KEY} value: {dark!r}")

        size = _read_json(kv, FONT_SIZE_KEY)
        if _is_font_size(size):
            prefs.set_font_size(size)
        elif size is not None:
            logger.warning(f"Ignoring invalid {FONT_SIZE_KEY} value: {size!r}")

        return prefs


def _is_font_size(value) -> bool:
    # bool is an int subclass; NaN and Infinity are valid JSON to Python
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _read_json(kv: KeyValueStore, key: str):
    try:
        raw = kv.get(key)
    except StorageError as e:
        logger.warning(f"Could not read {key}: {e}")
        return None
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        logger.warning(f"Ignoring undecodable {key}")
        return None

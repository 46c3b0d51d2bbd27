"""File-based preference storage adapter."""

import logging
from pathlib import Path

from ..core.preferences import (
    DEFAULT_DARK_MODE,
    DEFAULT_ZOOM,
    ZOOM_LIMITS,
    ZoomLimits,
    coerce_stored_zoom,
    validate_zoom,
)
from ..errors import CorruptDataError, DaybookError, InvalidInputError
from .json_files import read_json, write_json_atomic

logger = logging.getLogger(__name__)

ZOOM_FILE = "zoom_level.json"
DARK_MODE_FILE = "dark_mode.json"


class FilePreferenceStore:
    """
    File-based preference storage.

    Implements PreferenceStore protocol. Each preference is a one-key JSON
    object in its own file inside the data directory.
    """

    def __init__(self, data_dir: Path | str, limits: ZoomLimits = ZOOM_LIMITS):
        self.data_dir = Path(data_dir).expanduser()
        self.limits = limits

    @property
    def zoom_path(self) -> Path:
        return self.data_dir / ZOOM_FILE

    @property
    def dark_mode_path(self) -> Path:
        return self.data_dir / DARK_MODE_FILE

    def zoom_limits(self) -> ZoomLimits:
        return self.limits

    def save_zoom(self, value: float) -> None:
        """Persist a zoom level. Rejects non-finite and out-of-range values."""
        zoom = validate_zoom(value, self.limits)
        write_json_atomic(self.zoom_path, {"zoom_level": zoom})

    def load_zoom(self) -> float:
        """
        Load the zoom level.

        Never fails on bad data: a missing, unreadable or out-of-range value
        falls back to the default.
        """
        path = self.zoom_path
        if not path.exists():
            return DEFAULT_ZOOM

        try:
            data = read_json(path)
        except DaybookError as e:
            logger.warning(f"Ignoring unreadable zoom preference: {e}")
            return DEFAULT_ZOOM

        raw = data.get("zoom_level") if isinstance(data, dict) else None
        zoom = coerce_stored_zoom(raw, self.limits)
        if zoom != raw or isinstance(raw, bool):
            logger.warning(f"Invalid stored zoom level {raw!r}, using {DEFAULT_ZOOM}")
        return zoom

    def save_dark_mode(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise InvalidInputError(f"Dark mode must be a bool, got {type(value).__name__}")
        write_json_atomic(self.dark_mode_path, {"dark_mode": value})

    def load_dark_mode(self) -> bool:
        """Load the dark mode flag. Missing file means light mode."""
        path = self.dark_mode_path
        if not path.exists():
            return DEFAULT_DARK_MODE

        data = read_json(path)
        if not isinstance(data, dict) or not isinstance(data.get("dark_mode"), bool):
            raise CorruptDataError(f"{DARK_MODE_FILE} does not contain a dark_mode flag")
        return data["dark_mode"]

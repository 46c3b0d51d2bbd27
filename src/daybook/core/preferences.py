"""Preference rules - zoom bounds and validation, no I/O."""

import math
from dataclasses import dataclass

from ..errors import InvalidInputError

DEFAULT_ZOOM = 1.0
DEFAULT_DARK_MODE = False


@dataclass(frozen=True)
class ZoomLimits:
    """Closed range of supported zoom levels."""

    min_zoom: float = 0.5
    max_zoom: float = 3.0

    def contains(self, value: float) -> bool:
        return self.min_zoom <= value <= self.max_zoom

    def to_dict(self) -> dict:
        return {"min_zoom": self.min_zoom, "max_zoom": self.max_zoom}


ZOOM_LIMITS = ZoomLimits()


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_zoom(value, limits: ZoomLimits = ZOOM_LIMITS) -> float:
    """
    Check a zoom level before it is persisted.

    Out-of-range values are rejected rather than clamped.
    """
    if not _is_number(value):
        raise InvalidInputError(f"Zoom level must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidInputError(f"Zoom level must be finite, got {value}")
    if not limits.contains(value):
        raise InvalidInputError(
            f"Zoom level {value} outside supported range "
            f"[{limits.min_zoom}, {limits.max_zoom}]"
        )
    return float(value)


def coerce_stored_zoom(value, limits: ZoomLimits = ZOOM_LIMITS) -> float:
    """Stored zoom level, or the default if it is unusable."""
    if not _is_number(value) or not math.isfinite(value) or not limits.contains(value):
        return DEFAULT_ZOOM
    return float(value)

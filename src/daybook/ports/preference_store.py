"""Preference storage interface."""

from typing import Protocol

from ..core.preferences import ZoomLimits


class PreferenceStore(Protocol):
    """Interface for UI preferences."""

    def save_zoom(self, value: float) -> None: ...

    def load_zoom(self) -> float: ...

    def zoom_limits(self) -> ZoomLimits: ...

    def save_dark_mode(self, value: bool) -> None: ...

    def load_dark_mode(self) -> bool: ...

"""Ports - interfaces/protocols for storage."""

from .day_store import DayStore
from .preference_store import PreferenceStore

__all__ = [
    "DayStore",
    "PreferenceStore",
]

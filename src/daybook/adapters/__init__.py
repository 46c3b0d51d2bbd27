"""Adapters - filesystem implementations of ports."""

from .file_day_store import FileDayStore
from .file_preferences import FilePreferenceStore

__all__ = [
    "FileDayStore",
    "FilePreferenceStore",
]

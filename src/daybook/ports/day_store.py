"""Day record storage interface."""

from datetime import date
from typing import Protocol

from ..core.days import DayData


class DayStore(Protocol):
    """Interface for reading and writing day records."""

    def load(self, target_date: date | str) -> DayData:
        """Load the record for a date. Returns an empty record if none is stored."""
        ...

    def save(self, day: DayData) -> None:
        """Write/overwrite the record for day.date."""
        ...

    def exists(self, target_date: date | str) -> bool:
        """Check if a record is stored for a date."""
        ...

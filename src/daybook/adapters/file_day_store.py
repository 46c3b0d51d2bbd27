"""File-based day record storage adapter."""

import logging
from datetime import date
from pathlib import Path

from ..core.days import DayData, as_date, date_key
from .json_files import read_json, write_json_atomic

logger = logging.getLogger(__name__)


class FileDayStore:
    """
    File-based day record storage.

    Implements DayStore protocol. Each day gets a JSON file named after its
    date key. Nothing is written until save() is called.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    def path_for_date(self, target_date: date | str) -> Path:
        """Get the file path for a given date."""
        return self.data_dir / f"{date_key(as_date(target_date))}.json"

    def load(self, target_date: date | str) -> DayData:
        """Load the record for a date. Returns an empty record if none is stored."""
        day = as_date(target_date)
        path = self.path_for_date(day)
        if not path.exists():
            return DayData(date=day)
        return DayData.from_dict(read_json(path))

    def save(self, day: DayData) -> None:
        """Write/overwrite the record for day.date."""
        path = self.path_for_date(day.date)
        write_json_atomic(path, day.to_dict())
        logger.info(f"Saved {day.key} ({len(day.todos)} todos)")

    def exists(self, target_date: date | str) -> bool:
        """Check if a record is stored for a date."""
        return self.path_for_date(target_date).exists()

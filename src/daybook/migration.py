"""One-time migration of legacy calendar events into day todos."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .adapters.file_day_store import FileDayStore
from .adapters.json_files import read_json
from .core.days import create_todo_item, parse_date_key, prepend_todos
from .errors import CorruptDataError, StorageError
from .ports.day_store import DayStore

logger = logging.getLogger(__name__)

LEGACY_EVENTS_FILE = "calendar_events.json"
BACKUP_SUFFIX = ".backup"


class MigrationStatus(Enum):
    """Outcome of a migration run."""

    NOT_NEEDED = "not_needed"  # No legacy file present
    EMPTY_BACKED_UP = "empty_backed_up"  # Legacy file had no events, retired anyway
    MIGRATED = "migrated"


@dataclass
class MigrationResult:
    """What a migration run did."""

    status: MigrationStatus
    migrated_count: int = 0
    dates_touched: int = 0
    backup_path: Path | None = None

    @property
    def message(self) -> str:
        if self.status == MigrationStatus.NOT_NEEDED:
            return "No calendar events to migrate"
        if self.status == MigrationStatus.EMPTY_BACKED_UP:
            return f"Calendar events file was empty, backed up to {self.backup_path.name}"
        return (
            f"Migrated {self.migrated_count} calendar events "
            f"across {self.dates_touched} days to todos"
        )


def legacy_events_path(data_dir: Path | str) -> Path:
    return Path(data_dir).expanduser() / LEGACY_EVENTS_FILE


def read_legacy_events(path: Path) -> dict[str, list[str]]:
    """Parse the legacy date-key -> event texts map."""
    data = read_json(path)
    if not isinstance(data, dict):
        raise CorruptDataError(f"{path.name} must contain an object of date keys")

    for key, events in data.items():
        if not isinstance(events, list) or not all(isinstance(e, str) for e in events):
            raise CorruptDataError(f"{path.name}: events for {key!r} must be a list of strings")
    return data


def _retire(path: Path) -> Path:
    """Rename the legacy file to its backup name, replacing any older backup."""
    backup = path.with_name(path.name + BACKUP_SUFFIX)
    try:
        os.replace(path, backup)
    except OSError as e:
        raise StorageError(f"Failed to back up {path.name}: {e}") from e
    logger.info(f"Backed up {path.name} to {backup.name}")
    return backup


def migrate_calendar_events(data_dir: Path | str, store: DayStore | None = None) -> MigrationResult:
    """
    Fold legacy calendar events into each day's todo list.

    Migrated events go in front of the day's existing todos, in their
    original order. The legacy file is renamed to a backup once every date
    has been saved, so a second run finds nothing to do.

    There is no rollback: if a date fails to parse or save, days already
    written in this run keep their migrated todos and the legacy file stays
    in place. Re-running then adds those events again.
    """
    path = legacy_events_path(data_dir)
    if not path.exists():
        logger.debug(f"No {LEGACY_EVENTS_FILE} in {path.parent}, nothing to migrate")
        return MigrationResult(status=MigrationStatus.NOT_NEEDED)

    events_by_date = read_legacy_events(path)

    if not events_by_date:
        backup = _retire(path)
        return MigrationResult(status=MigrationStatus.EMPTY_BACKED_UP, backup_path=backup)

    store = store or FileDayStore(data_dir)
    migrated = 0

    for key, events in events_by_date.items():
        target = parse_date_key(key)
        day = store.load(target)
        new_todos = [create_todo_item(text) for text in events]
        store.save(prepend_todos(day, new_todos))
        migrated += len(new_todos)
        logger.info(f"Migrated {len(new_todos)} events to {key}")

    backup = _retire(path)
    result = MigrationResult(
        status=MigrationStatus.MIGRATED,
        migrated_count=migrated,
        dates_touched=len(events_by_date),
        backup_path=backup,
    )
    logger.info(result.message)
    return result

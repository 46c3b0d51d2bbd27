"""Shared workflow layer between the UI and the CLI.

Every function takes plain data plus the data directory and builds its
store per call, so nothing is held between calls.
"""

import logging
from datetime import date
from pathlib import Path

from .adapters.file_day_store import FileDayStore
from .adapters.file_preferences import FilePreferenceStore
from .core.days import (
    DayData,
    TodoItem,
    as_date,
    create_todo_item,
    edit_todo_fields,
    next_day,
    reorder,
    reset_for_move,
    split_flagged,
    take_todo,
)
from .core.preferences import ZOOM_LIMITS, ZoomLimits
from .errors import InvalidInputError
from .migration import MigrationResult, migrate_calendar_events

logger = logging.getLogger(__name__)


# ============== Day records ==============


def load_day(target_date: date | str, data_dir: Path | str) -> DayData:
    return FileDayStore(data_dir).load(target_date)


def save_day(day: DayData, data_dir: Path | str) -> None:
    FileDayStore(data_dir).save(day)


def new_todo(text: str) -> TodoItem:
    return create_todo_item(text)


def add_todo(text: str, target_date: date | str, data_dir: Path | str) -> TodoItem:
    """Create a todo and append it to a day."""
    store = FileDayStore(data_dir)
    day = store.load(target_date)
    todo = create_todo_item(text)
    day.todos.append(todo)
    store.save(day)
    return todo


def delete_todo(todo_id: str, target_date: date | str, data_dir: Path | str) -> TodoItem:
    """Remove a todo from a day. Returns the removed todo."""
    store = FileDayStore(data_dir)
    day, todo = take_todo(store.load(target_date), todo_id)
    store.save(day)
    logger.info(f"Deleted todo {todo_id} from {day.key}")
    return todo


def edit_todo(
    todo_id: str,
    target_date: date | str,
    data_dir: Path | str,
    text: str | None = None,
    notes: str | None = None,
) -> TodoItem:
    """Change a todo's text and/or notes. Fields left as None are kept."""
    store = FileDayStore(data_dir)
    day, todo = edit_todo_fields(store.load(target_date), todo_id, text=text, notes=notes)
    store.save(day)
    return todo


def reorder_todo(todo_id: str, new_index: int, target_date: date | str, data_dir: Path | str) -> DayData:
    """Move a todo to a new 0-based position on its day."""
    store = FileDayStore(data_dir)
    day = reorder(store.load(target_date), todo_id, new_index)
    store.save(day)
    return day


def move_todo_to_date(
    todo_id: str,
    from_date: date | str,
    to_date: date | str,
    data_dir: Path | str,
) -> TodoItem:
    """
    Move a todo to another day, reopening it.

    The target day is saved first; if rewriting the source then fails the
    todo exists on both days rather than on neither.
    """
    source_date = as_date(from_date)
    target_date = as_date(to_date)
    if source_date == target_date:
        raise InvalidInputError(f"Todo is already on {source_date.isoformat()}")

    store = FileDayStore(data_dir)
    source, todo = take_todo(store.load(source_date), todo_id)

    moved = reset_for_move(todo)
    target = store.load(target_date)
    target.todos.append(moved)
    store.save(target)
    store.save(source)

    logger.info(f"Moved todo {todo_id} from {source_date} to {target_date}")
    return moved


def carry_over(target_date: date | str, data_dir: Path | str) -> list[TodoItem]:
    """Move every todo flagged move_to_next_day onto the following day."""
    store = FileDayStore(data_dir)
    day = store.load(target_date)
    remaining, flagged = split_flagged(day)
    if not flagged:
        return []

    moved = [reset_for_move(t) for t in flagged]
    tomorrow = store.load(next_day(day.date))
    tomorrow.todos.extend(moved)
    store.save(tomorrow)
    store.save(remaining)

    logger.info(f"Carried {len(moved)} todos from {day.key} to {tomorrow.key}")
    return moved


# ============== Migration ==============


def migrate_legacy(data_dir: Path | str) -> MigrationResult:
    return migrate_calendar_events(data_dir)


# ============== Preferences ==============


def save_zoom(value: float, data_dir: Path | str) -> None:
    FilePreferenceStore(data_dir).save_zoom(value)


def load_zoom(data_dir: Path | str) -> float:
    return FilePreferenceStore(data_dir).load_zoom()


def zoom_limits() -> ZoomLimits:
    return ZOOM_LIMITS


def save_dark_mode(value: bool, data_dir: Path | str) -> None:
    FilePreferenceStore(data_dir).save_dark_mode(value)


def load_dark_mode(data_dir: Path | str) -> bool:
    return FilePreferenceStore(data_dir).load_dark_mode()

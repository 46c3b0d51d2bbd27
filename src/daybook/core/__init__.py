"""Functional core - pure business logic with no I/O."""

from .days import (
    TodoItem,
    DayData,
    parse_date_key,
    as_date,
    date_key,
    create_todo_item,
    prepend_todos,
    reset_for_move,
    take_todo,
    edit_todo_fields,
    reorder,
    split_flagged,
    next_day,
)
from .preferences import (
    ZoomLimits,
    ZOOM_LIMITS,
    DEFAULT_ZOOM,
    DEFAULT_DARK_MODE,
    validate_zoom,
    coerce_stored_zoom,
)

__all__ = [
    # Days
    "TodoItem",
    "DayData",
    "parse_date_key",
    "date_key",
    "create_todo_item",
    "prepend_todos",
    "reset_for_move",
    "take_todo",
    "edit_todo_fields",
    "reorder",
    "split_flagged",
    "next_day",
    # Preferences
    "ZoomLimits",
    "ZOOM_LIMITS",
    "DEFAULT_ZOOM",
    "DEFAULT_DARK_MODE",
    "validate_zoom",
    "coerce_stored_zoom",
]

"""Pure day-record domain logic - no I/O dependencies."""

import re
import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta

from ..errors import CorruptDataError, InvalidInputError, TodoNotFoundError

DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date_key(text: str) -> date:
    """Parse a strict YYYY-MM-DD date key."""
    if not isinstance(text, str) or not DATE_KEY_RE.match(text):
        raise InvalidInputError(f"Invalid date format: {text!r} (expected YYYY-MM-DD)")
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidInputError(f"Invalid date format: {text!r} ({e})") from e


def as_date(target_date: date | str) -> date:
    """Accept a date or its key."""
    if isinstance(target_date, str):
        return parse_date_key(target_date)
    return target_date


def date_key(target_date: date) -> str:
    """Format a date as its YYYY-MM-DD key."""
    return target_date.strftime("%Y-%m-%d")


def _require(data: dict, key: str, kind: type, what: str):
    if key not in data:
        raise CorruptDataError(f"{what} is missing field '{key}'")
    value = data[key]
    # bool is a subclass of int; only accept it where a bool is expected
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise CorruptDataError(f"{what} field '{key}' has wrong type: {type(value).__name__}")
    return value


@dataclass
class TodoItem:
    """A single todo on a day."""

    id: str
    text: str
    created_at: datetime
    completed: bool = False
    move_to_next_day: bool = False
    notes: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
            "move_to_next_day": self.move_to_next_day,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TodoItem":
        """
        Create TodoItem from its stored form.

        Records written before per-todo notes existed have no 'notes' key;
        those load with empty notes.
        """
        if not isinstance(data, dict):
            raise CorruptDataError(f"Todo must be an object, got {type(data).__name__}")

        raw_created = _require(data, "created_at", str, "Todo")
        try:
            created_at = datetime.fromisoformat(raw_created)
        except ValueError as e:
            raise CorruptDataError(f"Todo has invalid created_at: {raw_created!r}") from e

        notes = data.get("notes", "")
        if not isinstance(notes, str):
            raise CorruptDataError(f"Todo field 'notes' has wrong type: {type(notes).__name__}")

        return cls(
            id=_require(data, "id", str, "Todo"),
            text=_require(data, "text", str, "Todo"),
            completed=_require(data, "completed", bool, "Todo"),
            created_at=created_at,
            move_to_next_day=_require(data, "move_to_next_day", bool, "Todo"),
            notes=notes,
        )


@dataclass
class DayData:
    """Everything recorded for one calendar date."""

    date: date
    todos: list[TodoItem] = field(default_factory=list)
    notes: str = ""

    @property
    def key(self) -> str:
        return date_key(self.date)

    def to_dict(self) -> dict:
        return {
            "date": self.key,
            "todos": [t.to_dict() for t in self.todos],
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DayData":
        """Create DayData from its stored form."""
        if not isinstance(data, dict):
            raise CorruptDataError(f"Day record must be an object, got {type(data).__name__}")

        raw_date = _require(data, "date", str, "Day record")
        try:
            day = parse_date_key(raw_date)
        except InvalidInputError as e:
            raise CorruptDataError(f"Day record has invalid date: {raw_date!r}") from e

        todos = _require(data, "todos", list, "Day record")
        return cls(
            date=day,
            todos=[TodoItem.from_dict(t) for t in todos],
            notes=_require(data, "notes", str, "Day record"),
        )


def create_todo_item(text: str) -> TodoItem:
    """New todo with a fresh id, stamped with the current local time."""
    return TodoItem(
        id=str(uuid.uuid4()),
        text=text,
        created_at=datetime.now().astimezone(),
    )


def prepend_todos(day: DayData, items: list[TodoItem]) -> DayData:
    """
    Place items before the day's existing todos.

    Both groups keep their relative order; existing todos and the day's
    notes are not modified.
    """
    return replace(day, todos=list(items) + list(day.todos))


def reset_for_move(todo: TodoItem) -> TodoItem:
    """Copy of a todo as it lands on another day: open and unflagged."""
    return replace(todo, completed=False, move_to_next_day=False)


def take_todo(day: DayData, todo_id: str) -> tuple[DayData, TodoItem]:
    """
    Remove a todo by id.

    Returns: (day without the todo, removed todo)
    """
    for i, todo in enumerate(day.todos):
        if todo.id == todo_id:
            remaining = day.todos[:i] + day.todos[i + 1 :]
            return replace(day, todos=remaining), todo
    raise TodoNotFoundError(f"Todo {todo_id} not found on {day.key}")


def edit_todo_fields(
    day: DayData,
    todo_id: str,
    text: str | None = None,
    notes: str | None = None,
) -> tuple[DayData, TodoItem]:
    """
    Change a todo's text and/or notes in place in the list.

    Fields left as None are kept. Returns: (updated day, updated todo)
    """
    for i, todo in enumerate(day.todos):
        if todo.id == todo_id:
            edited = replace(
                todo,
                text=todo.text if text is None else text,
                notes=todo.notes if notes is None else notes,
            )
            todos = list(day.todos)
            todos[i] = edited
            return replace(day, todos=todos), edited
    raise TodoNotFoundError(f"Todo {todo_id} not found on {day.key}")


def reorder(day: DayData, todo_id: str, new_index: int) -> DayData:
    """
    Move a todo to position new_index (0-based, in the resulting list).

    The other todos keep their relative order.
    """
    remaining, todo = take_todo(day, todo_id)
    if not 0 <= new_index <= len(remaining.todos):
        raise InvalidInputError(
            f"Position {new_index} out of range for {len(day.todos)} todos on {day.key}"
        )
    todos = list(remaining.todos)
    todos.insert(new_index, todo)
    return replace(day, todos=todos)


def split_flagged(day: DayData) -> tuple[DayData, list[TodoItem]]:
    """
    Split off todos flagged for the next day.

    Returns: (day keeping unflagged todos, flagged todos in original order)
    """
    kept = [t for t in day.todos if not t.move_to_next_day]
    flagged = [t for t in day.todos if t.move_to_next_day]
    return replace(day, todos=kept), flagged


def next_day(target_date: date) -> date:
    return target_date + timedelta(days=1)

"""Daybook CLI - bullet journal from the terminal."""

import json
import logging
import sys
from datetime import date

import click

from . import workflows
from .config import get_data_dir, load_config
from .core.days import DayData, parse_date_key
from .errors import DaybookError
from .pomodoro import PomodoroTimer


def _target(target_date: str | None) -> date:
    return parse_date_key(target_date) if target_date else date.today()


def _data_dir():
    return get_data_dir(load_config())


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _todo_at(day: DayData, index: int):
    """Todo by its 1-based position as shown by `show`."""
    if not 1 <= index <= len(day.todos):
        raise click.BadParameter(f"no todo #{index} on {day.key}", param_hint="INDEX")
    return day.todos[index - 1]


def _log_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


date_option = click.option(
    "--date", "-d", "target_date", default=None, help="Date (YYYY-MM-DD), defaults to today"
)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Daybook - daily todos and notes."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else _log_level(config.log_level),
    )


@main.command()
@date_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(target_date: str | None, as_json: bool):
    """Show a day's todos and notes."""
    try:
        day = workflows.load_day(_target(target_date), _data_dir())
    except DaybookError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(day.to_dict(), indent=2, ensure_ascii=False))
        return

    click.echo(f"### {day.date.strftime('%A, %B %d')}")
    if not day.todos:
        click.echo("  No todos.")
    for i, todo in enumerate(day.todos, start=1):
        mark = "x" if todo.completed else " "
        carry = " →" if todo.move_to_next_day else ""
        click.echo(f"  {i:2}. [{mark}] {todo.text}{carry}")
        if todo.notes:
            click.echo(f"        {todo.notes}")

    if day.notes:
        click.echo(f"\nNotes:\n{day.notes}")


@main.command()
@click.argument("text")
@date_option
def add(text: str, target_date: str | None):
    """Add a todo."""
    try:
        workflows.add_todo(text, _target(target_date), _data_dir())
    except DaybookError as e:
        _fail(e)
    click.echo(f"✓ Added: {text}")


@main.command()
@click.argument("index", type=int)
@date_option
def done(index: int, target_date: str | None):
    """Toggle a todo's completed state."""
    try:
        data_dir = _data_dir()
        day = workflows.load_day(_target(target_date), data_dir)
        todo = _todo_at(day, index)
        todo.completed = not todo.completed
        workflows.save_day(day, data_dir)
    except DaybookError as e:
        _fail(e)
    state = "done" if todo.completed else "open"
    click.echo(f"✓ Marked {state}: {todo.text}")


@main.command()
@click.argument("index", type=int)
@date_option
def flag(index: int, target_date: str | None):
    """Toggle whether a todo carries over to the next day."""
    try:
        data_dir = _data_dir()
        day = workflows.load_day(_target(target_date), data_dir)
        todo = _todo_at(day, index)
        todo.move_to_next_day = not todo.move_to_next_day
        workflows.save_day(day, data_dir)
    except DaybookError as e:
        _fail(e)
    state = "will carry over" if todo.move_to_next_day else "stays"
    click.echo(f"✓ {todo.text} {state}")


@main.command()
@click.argument("text")
@date_option
def note(text: str, target_date: str | None):
    """Replace the day's notes."""
    try:
        data_dir = _data_dir()
        day = workflows.load_day(_target(target_date), data_dir)
        day.notes = text
        workflows.save_day(day, data_dir)
    except DaybookError as e:
        _fail(e)
    click.echo("✓ Notes saved")


@main.command()
@click.argument("index", type=int)
@date_option
def delete(index: int, target_date: str | None):
    """Delete a todo."""
    try:
        data_dir = _data_dir()
        target = _target(target_date)
        todo = _todo_at(workflows.load_day(target, data_dir), index)
        workflows.delete_todo(todo.id, target, data_dir)
    except DaybookError as e:
        _fail(e)
    click.echo(f"✓ Deleted: {todo.text}")


@main.command()
@click.argument("index", type=int)
@click.option("--text", default=None, help="New todo text")
@click.option("--notes", default=None, help="New todo notes")
@date_option
def edit(index: int, text: str | None, notes: str | None, target_date: str | None):
    """Edit a todo's text and/or notes."""
    if text is None and notes is None:
        raise click.UsageError("Pass --text and/or --notes")
    try:
        data_dir = _data_dir()
        target = _target(target_date)
        todo = _todo_at(workflows.load_day(target, data_dir), index)
        todo = workflows.edit_todo(todo.id, target, data_dir, text=text, notes=notes)
    except DaybookError as e:
        _fail(e)
    click.echo(f"✓ Updated: {todo.text}")


@main.command()
@click.argument("index", type=int)
@click.argument("position", type=int)
@date_option
def reorder(index: int, position: int, target_date: str | None):
    """Move todo INDEX to POSITION (both as numbered by `show`)."""
    try:
        data_dir = _data_dir()
        target = _target(target_date)
        todo = _todo_at(workflows.load_day(target, data_dir), index)
        workflows.reorder_todo(todo.id, position - 1, target, data_dir)
    except DaybookError as e:
        _fail(e)
    click.echo(f"✓ Moved to #{position}: {todo.text}")


@main.command()
@click.argument("index", type=int)
@click.argument("to_date")
@date_option
def move(index: int, to_date: str, target_date: str | None):
    """Move a todo to another date."""
    try:
        data_dir = _data_dir()
        source = _target(target_date)
        todo = _todo_at(workflows.load_day(source, data_dir), index)
        workflows.move_todo_to_date(todo.id, source, to_date, data_dir)
    except DaybookError as e:
        _fail(e)
    click.echo(f"✓ Moved to {to_date}: {todo.text}")


@main.command("carry-over")
@date_option
def carry_over(target_date: str | None):
    """Move flagged todos to the next day."""
    try:
        moved = workflows.carry_over(_target(target_date), _data_dir())
    except DaybookError as e:
        _fail(e)

    if not moved:
        click.echo("Nothing flagged to carry over.")
        return
    for todo in moved:
        click.echo(f"  → {todo.text}")
    click.echo(f"✓ Carried over {len(moved)} todos")


@main.command()
def migrate():
    """Fold legacy calendar events into todos."""
    try:
        result = workflows.migrate_legacy(_data_dir())
    except DaybookError as e:
        _fail(e)
    click.echo(result.message)


@main.command()
@click.argument("value", type=float, required=False)
def zoom(value: float | None):
    """Show or set the zoom level."""
    data_dir = _data_dir()
    if value is None:
        click.echo(f"{workflows.load_zoom(data_dir):.2f}")
        return
    try:
        workflows.save_zoom(value, data_dir)
    except DaybookError as e:
        _fail(e)
    click.echo(f"✓ Zoom set to {value:.2f}")


@main.command("zoom-limits")
def zoom_limits():
    """Show the supported zoom range."""
    click.echo(json.dumps(workflows.zoom_limits().to_dict()))


@main.command("dark-mode")
@click.argument("state", type=click.Choice(["on", "off"]), required=False)
def dark_mode(state: str | None):
    """Show or set dark mode."""
    try:
        data_dir = _data_dir()
        if state is None:
            click.echo("on" if workflows.load_dark_mode(data_dir) else "off")
            return
        workflows.save_dark_mode(state == "on", data_dir)
    except DaybookError as e:
        _fail(e)
    click.echo(f"✓ Dark mode {state}")


@main.command()
@click.argument("text")
@click.option("--minutes", "-m", type=float, default=None, help="Session length (default from config)")
def pomodoro(text: str, minutes: float | None):
    """Run a focus session for a task."""
    config = load_config()
    minutes = minutes if minutes is not None else config.pomodoro_minutes

    timer = PomodoroTimer()
    try:
        session = timer.start(minutes * 60, text, on_complete=lambda t: click.echo(f"\n🍅 Done: {t}"))
    except DaybookError as e:
        _fail(e)

    click.echo(f"🍅 {text} ({minutes:g} min) - Ctrl+C to stop")
    try:
        session.wait()
    except KeyboardInterrupt:
        session.cancel()
        click.echo("\nPomodoro stopped.")
    finally:
        timer.shutdown()


if __name__ == "__main__":
    main()

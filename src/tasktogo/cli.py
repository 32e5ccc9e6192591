"""Tasks To Go CLI - a single task list in the terminal."""

import json
import logging
import sys
from pathlib import Path

import click

from .adapters.file_store import FileKeyValueStore
from .config import load_config
from .core.store import TaskStore
from .core.tasks import Task
from .ports.kv_store import StorageError
from .preferences import MAX_FONT_SIZE, MIN_FONT_SIZE, Preferences

PALETTES = {
    False: {"title": None, "done": "bright_black", "accent": "blue", "heading": "blue"},
    True: {"title": "white", "done": "bright_black", "accent": "cyan", "heading": "bright_cyan"},
}


@click.group()
@click.version_option(package_name="tasks-to-go")
@click.option("--data-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory holding saved tasks and settings")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_dir: Path | None, debug: bool):
    """Tasks To Go - keep track of what needs doing."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else config.log_level,
    )
    ctx.obj = FileKeyValueStore(data_dir or config.resolved_data_dir)


def _fail(message: str):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _task_at(store: TaskStore, position: int) -> Task:
    """Resolve a 1-based list position to its task."""
    tasks = store.tasks
    if not 1 <= position <= len(tasks):
        if not tasks:
            _fail(f"No task at position {position}; the list is empty.")
        _fail(f"No task at position {position}; choose 1-{len(tasks)}.")
    return tasks[position - 1]


def _show_tasks(tasks: list[Task], prefs: Preferences) -> None:
    """Shared task list rendering."""
    if not tasks:
        click.echo("No tasks yet.")
        return

    palette = PALETTES[prefs.dark_mode]
    click.echo(click.style("Task List", fg=palette["heading"], bold=True))
    for pos, task in enumerate(tasks, start=1):
        check = "x" if task.is_completed else " "
        marker = click.style("*", fg=palette["accent"]) if task.is_selected else " "
        if task.is_completed:
            title = click.style(task.title, fg=palette["done"], strikethrough=True)
        else:
            title = click.style(task.title, fg=palette["title"])
        click.echo(f"{marker} {pos:>2}. [{check}] {title}")


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_tasks(kv: FileKeyValueStore, as_json: bool):
    """Show all tasks."""
    store = TaskStore(kv)
    prefs = Preferences.load(kv)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "preferences": {"dark_mode": prefs.dark_mode, "font_size": prefs.font_size},
                    "tasks": [
                        {"position": pos, **t.to_dict()}
                        for pos, t in enumerate(store.tasks, start=1)
                    ],
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        _show_tasks(store.tasks, prefs)


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def add(kv: FileKeyValueStore, words: tuple[str, ...]):
    """Add a task."""
    title = " ".join(words).strip()
    if not title:
        _fail("Task title cannot be empty.")

    store = TaskStore(kv)
    store.add(title)
    _show_tasks(store.tasks, Preferences.load(kv))


@main.command()
@click.argument("position", type=int)
@click.pass_obj
def done(kv: FileKeyValueStore, position: int):
    """Toggle completion of the task at POSITION."""
    store = TaskStore(kv)
    task = _task_at(store, position)
    store.toggle_completion(task.id)
    _show_tasks(store.tasks, Preferences.load(kv))


@main.command()
@click.argument("position", type=int)
@click.pass_obj
def select(kv: FileKeyValueStore, position: int):
    """Toggle selection of the task at POSITION."""
    store = TaskStore(kv)
    task = _task_at(store, position)
    store.toggle_selection(task.id)
    _show_tasks(store.tasks, Preferences.load(kv))


@main.command()
@click.argument("positions", nargs=-1, required=True, type=int)
@click.pass_obj
def delete(kv: FileKeyValueStore, positions: tuple[int, ...]):
    """Delete the tasks at the given POSITIONS."""
    store = TaskStore(kv)
    for position in positions:
        _task_at(store, position)

    store.delete_at({p - 1 for p in positions})
    _show_tasks(store.tasks, Preferences.load(kv))


@main.command("delete-selected")
@click.pass_obj
def delete_selected(kv: FileKeyValueStore):
    """Delete every selected task."""
    store = TaskStore(kv)
    store.delete_selected()
    _show_tasks(store.tasks, Preferences.load(kv))


@main.command()
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_obj
def clear(kv: FileKeyValueStore, yes: bool):
    """Delete all tasks."""
    store = TaskStore(kv)
    if not len(store):
        click.echo("No tasks yet.")
        return

    if not yes and not click.confirm(f"Delete all {len(store)} tasks?"):
        return

    store.delete_all()
    click.echo("All tasks deleted.")


@main.command()
@click.option("--dark/--light", "dark_mode", default=None, help="Switch dark mode on or off")
@click.option("--font-size", type=int, default=None,
              help=f"Font size ({MIN_FONT_SIZE}-{MAX_FONT_SIZE})")
@click.pass_obj
def settings(kv: FileKeyValueStore, dark_mode: bool | None, font_size: int | None):
    """Show or change display settings."""
    prefs = Preferences.load(kv)

    if dark_mode is not None or font_size is not None:
        if dark_mode is not None:
            prefs.dark_mode = dark_mode
        if font_size is not None:
            prefs.set_font_size(font_size)
        try:
            prefs.save(kv)
        except StorageError as e:
            _fail(f"Could not save settings: {e}")

    palette = PALETTES[prefs.dark_mode]
    click.echo(click.style("Settings", fg=palette["heading"], bold=True))
    click.echo(f"  Dark Mode: {'on' if prefs.dark_mode else 'off'}")
    click.echo(f"  Font Size: {prefs.font_size}")


if __name__ == "__main__":
    main()

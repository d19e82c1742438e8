"""tickoff CLI - to-do list in the terminal."""

import json
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import click

from .adapters.file_kv import FileKeyValueStore
from .adapters.task_storage import KeyValueTaskStore
from .bridge import TaskListBridge
from .config import Config, load_config
from .core.tasks import Task
from .repository import TaskRepository

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level, logging.WARNING),
    )


@contextmanager
def open_bridge(config: Config) -> Iterator[TaskListBridge]:
    """Open the task list for one command; pending writes finish on exit."""
    store = KeyValueTaskStore(FileKeyValueStore(config.data_dir), key=config.storage_key)
    with TaskRepository.open(store) as repository:
        yield TaskListBridge(repository)


def format_task(task: Task) -> str:
    mark = "x" if task.checked else " "
    return f"{task.id}  [{mark}] {task.text}"


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="tickoff")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the task list.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx, data_dir: Path | None, verbose: bool):
    """tickoff - a single to-do list."""
    config = load_config()
    if data_dir is not None:
        config.data_dir = data_dir
    if verbose:
        config.log_level = "DEBUG"
    setup_logging(config.log_level)
    ctx.obj = config


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_tasks(config: Config, as_json: bool):
    """Show all tasks in the order they were added."""
    with open_bridge(config) as bridge:
        tasks = bridge.tasks

    if as_json:
        click.echo(json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False))
        return

    if not tasks:
        click.echo("Nothing to do.")
        return

    for task in tasks:
        click.echo(format_task(task))


@main.command()
@click.argument("words", nargs=-1)
@click.pass_obj
def add(config: Config, words: tuple[str, ...]):
    """Add a task. Blank text is ignored."""
    with open_bridge(config) as bridge:
        task = bridge.create(" ".join(words))
    if task is not None:
        click.echo(format_task(task))


@main.command()
@click.argument("task_id")
@click.pass_obj
def check(config: Config, task_id: str):
    """Check off a task, or un-check it if already checked."""
    with open_bridge(config) as bridge:
        task = bridge.toggle(task_id)
    if task is None:
        _fail(f"No task with id {task_id}")
    click.echo(format_task(task))


@main.command()
@click.argument("task_id")
@click.pass_obj
def delete(config: Config, task_id: str):
    """Delete a task."""
    with open_bridge(config) as bridge:
        removed = bridge.delete(task_id)
    if not removed:
        _fail(f"No task with id {task_id}")
    click.echo(f"Deleted {task_id}")


@main.command()
@click.argument("task_id")
@click.option("--text", "new_text", help="Replacement text; prompts when omitted")
@click.pass_obj
def edit(config: Config, task_id: str, new_text: str | None):
    """Edit a task's text."""
    with open_bridge(config) as bridge:
        task = next((t for t in bridge.tasks if t.id == task_id), None)
        if task is None:
            _fail(f"No task with id {task_id}")

        draft = bridge.open_edit(task)
        if new_text is None:
            new_text = click.prompt("Text", default=draft.text, show_default=True)
            bridge.update_draft_text(new_text)
            if not click.confirm("Save?", default=True):
                bridge.cancel()
                click.echo("Cancelled.")
                return
        else:
            bridge.update_draft_text(new_text)

        saved = bridge.save()

    click.echo(format_task(saved))

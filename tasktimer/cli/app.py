"""Task timer CLI: one subcommand, one store operation."""

import json
from pathlib import Path
from typing import Annotated

import typer

from tasktimer.cli.errors import error_feedback
from tasktimer.config import load_settings
from tasktimer.format import format_task_list, task_to_dict
from tasktimer.lib.logs import configure_logging
from tasktimer.store import TaskStore, parse_task_id

main_app = typer.Typer(
    invoke_without_command=True,
    add_completion=False,
    help="A CLI tool to manage tasks and their timers.",
)


def _store(ctx: typer.Context) -> TaskStore:
    return ctx.obj["store"]


def _confirm(ctx: typer.Context, msg: str) -> None:
    """Print a one-line confirmation unless --quiet was given."""
    if not ctx.obj.get("quiet"):
        typer.echo(msg)


@main_app.callback(context_settings={"help_option_names": ["-h", "--help"]})
@error_feedback
def main_callback(
    ctx: typer.Context,
    db: Annotated[Path | None, typer.Option("--db", help="Path to the SQLite database.")] = None,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
):
    if not isinstance(ctx.obj, dict):
        ctx.obj = {}
    ctx.obj["json"] = json_output
    ctx.obj["quiet"] = quiet_output

    if ctx.resilient_parsing:
        return

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        return

    settings = load_settings(db)
    configure_logging("DEBUG" if verbose else settings.log_level)

    if ctx.obj.get("store") is None:
        store = TaskStore(settings.db_path)
        ctx.obj["store"] = store
        ctx.call_on_close(store.close)


@main_app.command("add")
@error_feedback
def add(
    ctx: typer.Context,
    name: str = typer.Argument("", help="Task name"),
):
    """Add a new task."""
    task_id = _store(ctx).add_task(name)
    _confirm(ctx, f"Task added: {task_id}: {name.strip()}")


@main_app.command("list")
@error_feedback
def list_cmd(
    ctx: typer.Context,
    status: Annotated[str | None, typer.Option("--status", help="Filter tasks by status")] = None,
    on_date: Annotated[
        str | None, typer.Option("--date", help="Filter tasks by date (YYYY-MM-DD)")
    ] = None,
):
    """List all tasks."""
    tasks = _store(ctx).list_tasks(status=status, on_date=on_date)

    if ctx.obj.get("json"):
        typer.echo(json.dumps([task_to_dict(t) for t in tasks], indent=2))
    else:
        typer.echo(format_task_list(tasks))


@main_app.command("start")
@error_feedback
def start(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID to start"),
):
    """Start a task. Starting a stopped task resets its timer to now."""
    tid = parse_task_id(task_id)
    _store(ctx).start_task(tid)
    _confirm(ctx, f"Task started: {tid}")


@main_app.command("stop")
@error_feedback
def stop(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID to stop"),
):
    """Stop a task timer."""
    tid = parse_task_id(task_id)
    _store(ctx).stop_task(tid)
    _confirm(ctx, f"Task stopped: {tid}")


@main_app.command("delete")
@error_feedback
def delete(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID to delete"),
):
    """Delete a task."""
    tid = parse_task_id(task_id)
    _store(ctx).delete_task(tid)
    _confirm(ctx, f"Task deleted: {tid}")


@main_app.command("complete")
@error_feedback
def complete(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID to complete"),
):
    """Complete a task."""
    tid = parse_task_id(task_id)
    _store(ctx).complete_task(tid)
    _confirm(ctx, f"Task completed: {tid}")


@main_app.command("save")
@error_feedback
def save(ctx: typer.Context):
    """Save tasks to SQLite database."""
    # Every write is already committed; kept for scripts that still call it.
    _confirm(ctx, "Tasks saved to SQLite database")


ALIASES = {
    "a": add,
    "ls": list_cmd,
    "s": start,
    "t": stop,
    "del": delete,
    "d": delete,
    "c": complete,
    "sv": save,
}

for _alias, _command in ALIASES.items():
    main_app.command(_alias, hidden=True)(_command)


def main() -> None:
    """Entry point for the tasktimer command."""
    try:
        main_app()
    except SystemExit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e


app = main_app

__all__ = ["app", "main"]

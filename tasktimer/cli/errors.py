"""CLI error handling: wrap commands to report errors instead of tracebacks."""

import logging
from functools import wraps

import typer
from click.exceptions import Exit

from tasktimer.errors import TimerError

logger = logging.getLogger(__name__)


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Domain errors exit with their own ``exit_code``; anything else exits 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except TimerError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(e.exit_code) from e
        except Exception as e:
            logger.debug("Unhandled error in command", exc_info=True)
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper

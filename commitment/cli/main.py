"""Main CLI command for committing with a ticket-prefixed message."""

from typing import List, Optional

import typer

from commitment import __version__
from commitment.config import CommitConfig
from commitment.driver import run_commit
from commitment.git import (
    CommitError,
    GitError,
    NoChangesError,
    RepositoryAccessError,
)
from commitment.log import setup_logging


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"commitment {__version__}")
        raise typer.Exit()


def commit_command(
    message: Optional[List[str]] = typer.Argument(
        None,
        help="Commit message; a leading ticket such as ABC-123 is normalized",
        show_default=False,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Print the composed message without staging or committing",
    ),
    no_stage: bool = typer.Option(
        False,
        "--no-stage",
        help="Commit only what is already staged",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Stage all changes and commit them with a ticket-prefixed message.

    The ticket comes from the current branch name (feature/ABC-123-v2 ->
    ABC-123) or, failing that, from the start of the message.
    """
    setup_logging(verbose)

    raw_message = " ".join(message or [])
    config = CommitConfig(dry_run=dry_run, stage_all=not no_stage)

    try:
        result = run_commit(raw_message, config)
    except NoChangesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except RepositoryAccessError as e:
        typer.echo(f"Repository error: {e}", err=True)
        raise typer.Exit(1)
    except CommitError as e:
        typer.echo(f"Commit failed: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    if config.dry_run:
        typer.echo(result.message)
        return

    typer.echo(f"[{result.branch} {result.sha or 'HEAD'}] {result.message}")

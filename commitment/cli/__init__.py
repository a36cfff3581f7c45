"""CLI entry point for commitment."""

import typer

from commitment.cli.main import commit_command

app = typer.Typer(
    name="commitment",
    help="commitment: ticket-prefixed git commits",
    add_completion=False,
)

app.command()(commit_command)


__all__ = [
    "app",
    "commit_command",
]

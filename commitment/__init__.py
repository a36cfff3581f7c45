"""Ticket-prefixed git commits from the command line."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitment")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

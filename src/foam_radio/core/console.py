"""Shared Rich console for foam-radio command output."""

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Return the console the CLI prints its tables and messages to."""
    global _console
    if _console is None:
        _console = Console()
    return _console

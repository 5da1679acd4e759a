"""User-facing console output for CLI commands.

Usage::

    from testlens.core.console import pluralize, status

    status("Detected vitest")
    status("All tests passed", style="success")  # ✓ All tests passed
    status(f"{pluralize(2, 'failure')}", style="error")  # ✗ 2 failures

Messages are rich markup; escape untrusted text with ``rich.markup.escape``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

# Results go to stdout so they can be piped; logs stay on stderr
_console = Console(highlight=False)

# Style prefixes
_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def _get_logger() -> BoundLogger:
    """Get logger lazily to respect runtime config."""
    from testlens.core.logging import get_logger

    return get_logger("console")


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status line."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}", soft_wrap=True)

    _get_logger().debug("status", message=message, style=style)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Args:
        count: The number of items
        singular: Singular form (e.g., "test")
        plural: Plural form (default: singular + "s")

    Returns:
        Formatted string like "1 test" or "3 tests"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"

"""Rich console output utilities for sclc-cli.

Progress and informational messages go to standard output; diagnostics go
to standard error. Colors are disabled when NO_COLOR is set.
"""

from __future__ import annotations

import os
from typing import Any

from rich.console import Console
from rich.markup import escape

_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False, stderr: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.
        stderr: If True, write to standard error instead of standard output.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(
        force_terminal=force_terminal,
        no_color=no_color or _force_no_color,
        stderr=stderr,
        soft_wrap=True,
        highlight=False,
    )


# Default console instances
console = create_console()
err_console = create_console(stderr=True)


def error(message: str, **kwargs: Any) -> None:
    """Print a diagnostic with red X on standard error.

    Args:
        message: The diagnostic to display.
        **kwargs: Additional arguments passed to console.print().

    Example:
        >>> error("Unknown option: -x")
        ✗ Unknown option: -x
    """
    err_console.print(f"[red]✗[/red] {escape(message)}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print a progress message on standard output.

    Args:
        message: The message to display.
        **kwargs: Additional arguments passed to console.print().
    """
    console.print(escape(message), **kwargs)

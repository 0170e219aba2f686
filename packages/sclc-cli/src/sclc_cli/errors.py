"""CLI error handling for sclc-cli.

This module wraps sclc-core exceptions into user-facing diagnostics
with the driver's exit codes.
"""

from __future__ import annotations

from typing import NoReturn

import click

from sclc_cli import output
from sclc_core.errors import SclcError

EXIT_SUCCESS = 0
EXIT_FAILURE = 1  # Every fatal diagnostic, and the no-argument usage banner


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing diagnostic.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE) -> None:
        """Initialize CLIError.

        Args:
            message: User-facing diagnostic.
            exit_code: Exit code for the CLI.
        """
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the diagnostic on the error stream.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        output.error(self.format_message())


def handle_sclc_error(err: SclcError) -> NoReturn:
    """Convert a core error into a CLI diagnostic.

    Args:
        err: Error raised by sclc-core.

    Raises:
        CLIError: Always, carrying the error's user message unchanged.
    """
    raise CLIError(err.user_message) from err

"""CLI entry point for sclc.

The driver accepts a small, fixed grammar (-v, -o, -i and input files), so
the argument list is handed to sclc-core's ConfigurationResolver untouched
instead of going through Click's option parser. The resolver owns every
diagnostic; this module only decides how to terminate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sclc_cli import output
from sclc_cli.errors import EXIT_FAILURE, handle_sclc_error
from sclc_core.errors import SclcError, UsageRequested
from sclc_core.observability import configure_logging
from sclc_core.resolver import resolve
from sclc_core.settings import PROGRAM_NAME

if TYPE_CHECKING:
    from sclc_core.models import CompilerConfiguration


class RawArgsCommand(click.Command):
    """Click command that passes its raw argument list to the callback.

    No option parsing happens here: every token, including "--" and
    "--help", reaches the callback as the "args" parameter in order.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Store the untouched arguments as the "args" parameter.

        Args:
            ctx: Click context.
            args: Remaining command-line arguments.

        Returns:
            An empty list; nothing is left for Click to process.
        """
        ctx.params["args"] = tuple(args)
        return []


def report_progress(config: CompilerConfiguration) -> None:
    """Print the resolved configuration as verbose progress messages."""
    origin = "from -o/--output" if config.output_explicitly_set else "derived"
    output.info(f"Output: {config.output_path} ({origin})")
    output.info(f"Include directory: {config.include_directory}")
    for state in config.files:
        output.info(f"Input: {state.path}")


@click.command(PROGRAM_NAME, cls=RawArgsCommand, add_help_option=False)
def cli(args: tuple[str, ...] = ()) -> None:
    """Simple Compiler - Just as the name suggests.

    Resolves the command line into a compiler configuration.
    """
    configure_logging()

    try:
        config = resolve([PROGRAM_NAME, *args])
    except UsageRequested as usage:
        click.echo(usage.usage, nl=False)
        raise SystemExit(EXIT_FAILURE) from None
    except SclcError as e:
        handle_sclc_error(e)

    with config:
        if config.verbose:
            report_progress(config)


if __name__ == "__main__":
    cli()

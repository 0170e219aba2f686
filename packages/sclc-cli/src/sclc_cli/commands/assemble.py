"""sclc-as command - Assemble generated assembly into an object file."""

from __future__ import annotations

import click
import rich_click as rclick

from sclc_cli.errors import handle_sclc_error
from sclc_core.assembler import assemble
from sclc_core.errors import AssemblerError
from sclc_core.observability import configure_logging
from sclc_core.settings import ASSEMBLER_ENV_VAR

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True


@click.command("sclc-as", cls=rclick.RichCommand)
@click.argument("output_name")
@click.argument("asm_file")
@click.option(
    "-a",
    "--assembler",
    "assembler",
    type=str,
    default=None,
    envvar=ASSEMBLER_ENV_VAR,
    help="Assembler executable [default: fasm]",
)
def assemble_cmd(output_name: str, asm_file: str, assembler: str | None) -> None:
    """Assemble ASM_FILE into OUTPUT_NAME.o.

    Runs the external assembler with its standard output suppressed.
    A non-zero exit from the assembler is reported and exits with status 1.

    Examples:

        sclc-as build/out build/out.s

        sclc-as --assembler /opt/fasm/fasm main main.s
    """
    configure_logging()

    try:
        assemble(output_name, asm_file, assembler=assembler)
    except AssemblerError as e:
        handle_sclc_error(e)


if __name__ == "__main__":
    assemble_cmd()

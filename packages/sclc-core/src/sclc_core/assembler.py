"""External assembler invocation for sclc.

Turns generated assembly text into an object file by running the
assembler (fasm by default, see SCLC_ASSEMBLER) as a child process.
The command is passed as an argument list; no shell is involved.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import structlog

from sclc_core.errors import AssemblerError
from sclc_core.settings import OBJECT_FILE_SUFFIX, get_assembler

logger = structlog.get_logger(__name__)


def object_path_for(output_base_name: str) -> Path:
    """Return the object file path for an output base name.

    Args:
        output_base_name: Output base name (e.g. "build/out").

    Returns:
        Path with the object suffix appended (e.g. "build/out.o").
    """
    return Path(f"{output_base_name}{OBJECT_FILE_SUFFIX}")


def build_command(
    output_base_name: str,
    assembly_source_path: str | Path,
    assembler: str | None = None,
) -> list[str]:
    """Build the assembler argument vector.

    Args:
        output_base_name: Base name for the object file.
        assembly_source_path: Generated assembly file.
        assembler: Assembler executable. Defaults to get_assembler().

    Returns:
        Argument vector: [assembler, source, object].
    """
    return [
        assembler or get_assembler(),
        str(assembly_source_path),
        str(object_path_for(output_base_name)),
    ]


def assemble(
    output_base_name: str,
    assembly_source_path: str | Path,
    *,
    assembler: str | None = None,
) -> Path:
    """Assemble a generated assembly file into "<output_base_name>.o".

    The assembler's standard output is discarded; its standard error is
    left attached so its own messages reach the user. Inputs are not
    validated here beyond what the assembler itself enforces.

    Args:
        output_base_name: Base name for the object file.
        assembly_source_path: Generated assembly file.
        assembler: Assembler executable. Defaults to SCLC_ASSEMBLER or fasm.

    Returns:
        Path to the produced object file.

    Raises:
        AssemblerError: If the assembler cannot be started or exits non-zero.

    Example:
        >>> assemble("build/out", "build/out.s")
        PosixPath('build/out.o')
    """
    command = build_command(output_base_name, assembly_source_path, assembler)
    logger.info("assembler_invoked", command=command)

    try:
        result = subprocess.run(command, stdout=subprocess.DEVNULL, check=False)
    except FileNotFoundError as e:
        raise AssemblerError(
            f"Assembler not found: {command[0]}",
            internal_details=str(e),
        ) from e
    except OSError as e:
        raise AssemblerError(
            f"Assembler could not be executed: {command[0]}",
            internal_details=str(e),
        ) from e

    if result.returncode != 0:
        raise AssemblerError(
            f"Assembly failed with code {result.returncode}",
            returncode=result.returncode,
        )

    object_path = object_path_for(output_base_name)
    logger.debug("assembler_completed", object_path=str(object_path))
    return object_path

"""Environment-driven settings for sclc.

Settings are read from environment variables at call time, with
module-level defaults:
- SCLC_ASSEMBLER: external assembler executable (default: fasm)
- SCLC_LOG_LEVEL: minimum level for internal structured logs (default: WARNING)
"""

from __future__ import annotations

import os

# Program name used in the usage banner
PROGRAM_NAME = "sclc"

# Include directory used when -i/--include_dir is not given
DEFAULT_INCLUDE_DIRECTORY = "."

# Suffix appended to the output base name for assembled objects
OBJECT_FILE_SUFFIX = ".o"

# Environment variable for the assembler executable
ASSEMBLER_ENV_VAR = "SCLC_ASSEMBLER"

# Default assembler executable
DEFAULT_ASSEMBLER = "fasm"

# Environment variable for internal log level
LOG_LEVEL_ENV_VAR = "SCLC_LOG_LEVEL"

# Default internal log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_assembler() -> str:
    """Get the assembler executable from the environment.

    Returns:
        Assembler command name or path.
    """
    return os.environ.get(ASSEMBLER_ENV_VAR) or DEFAULT_ASSEMBLER


def get_log_level() -> str:
    """Get the internal log level from the environment.

    Returns:
        Upper-cased level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    return (os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()

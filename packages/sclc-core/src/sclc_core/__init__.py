"""sclc-core: Argument resolution and assembler invocation for sclc.

This package provides:
- CompilerConfiguration: The resolved build configuration
- ConfigurationResolver / resolve(): Turn argv into a CompilerConfiguration
- FileState: Per-file compilation state
- assemble(): Run the external assembler on generated assembly
"""

from __future__ import annotations

__version__ = "0.1.0"

# Assembler invocation
from sclc_core.assembler import assemble, object_path_for

# Error types
from sclc_core.errors import (
    AssemblerError,
    DuplicateOptionError,
    FileStateError,
    IncludeDirectoryError,
    MissingInputError,
    MissingOptionValueError,
    OutputNameError,
    ResolutionError,
    SclcError,
    UnknownOptionError,
    UsageRequested,
)

# Per-file state
from sclc_core.file_state import FileState, create_file_state

# Resolved configuration
from sclc_core.models import CompilerConfiguration
from sclc_core.naming import derive_output_name
from sclc_core.resolver import USAGE, ConfigurationResolver, resolve

__all__ = [
    "__version__",
    # Resolution
    "ConfigurationResolver",
    "resolve",
    "USAGE",
    "CompilerConfiguration",
    "FileState",
    "create_file_state",
    "derive_output_name",
    # Assembler
    "assemble",
    "object_path_for",
    # Errors
    "SclcError",
    "UsageRequested",
    "ResolutionError",
    "MissingOptionValueError",
    "DuplicateOptionError",
    "IncludeDirectoryError",
    "UnknownOptionError",
    "MissingInputError",
    "OutputNameError",
    "FileStateError",
    "AssemblerError",
]

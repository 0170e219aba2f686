"""Command-line argument resolution for sclc.

This module turns the raw process argument vector into a validated
CompilerConfiguration:
- ConfigurationResolver: single left-to-right scan over the arguments
- resolve(): convenience wrapper using the default collaborators
- USAGE: usage banner shown when no arguments are given

Resolution is fail-fast. The first invalid argument raises a
ResolutionError subclass describing exactly what went wrong; nothing
partially resolved is ever returned.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from typing import NoReturn

import structlog

from sclc_core.errors import (
    DuplicateOptionError,
    FileStateError,
    IncludeDirectoryError,
    MissingInputError,
    MissingOptionValueError,
    OutputNameError,
    ResolutionError,
    UnknownOptionError,
    UsageRequested,
)
from sclc_core.file_state import FileState, create_file_state
from sclc_core.models import CompilerConfiguration
from sclc_core.naming import derive_output_name
from sclc_core.settings import DEFAULT_INCLUDE_DIRECTORY, PROGRAM_NAME

logger = structlog.get_logger(__name__)

VERBOSE_FLAGS = ("--verbose", "-v")
OUTPUT_FLAGS = ("--output", "-o")
INCLUDE_DIR_FLAGS = ("--include_dir", "-i")

USAGE = (
    "Simple Compiler - Just as the name suggests\n"
    f"Usage: {PROGRAM_NAME} [OPTIONS] <filename(s)>\n"
    "\n"
    "OPTIONS:\n"
    "--verbose      OR -v \t Print progress messages for various stages.\n"
    "--output       OR -o \t Specify output binary filename.\n"
    "--include_dir  OR -i \t Specify include directory path.\n"
)

FileStateFactory = Callable[[str], FileState | None]
NameDeriver = Callable[[str], str | None]


class ConfigurationResolver:
    """Resolve an argument vector into a CompilerConfiguration.

    Each call to resolve() starts from a clean slate, so one resolver can be
    reused for independent argument vectors.

    Attributes:
        file_state_factory: Builds the per-file state for an input path,
            returning None on failure.
        name_deriver: Derives the default output name from the first input,
            returning None on failure.
        error_count: Diagnostics emitted by the last resolve() call.

    Example:
        >>> resolver = ConfigurationResolver()
        >>> config = resolver.resolve(["sclc", "-o", "build/out", "main.sc"])
        >>> config.output_path
        'build/out'
    """

    def __init__(
        self,
        file_state_factory: FileStateFactory = create_file_state,
        name_deriver: NameDeriver = derive_output_name,
    ) -> None:
        self.file_state_factory = file_state_factory
        self.name_deriver = name_deriver
        self.error_count = 0

    def resolve(self, argv: Sequence[str]) -> CompilerConfiguration:
        """Resolve the full process argument vector.

        Args:
            argv: Argument vector including the program name at index 0.

        Returns:
            The resolved configuration, owning one FileState per input file.

        Raises:
            UsageRequested: If argv holds nothing beyond the program name.
            ResolutionError: On the first invalid argument or failed input.
        """
        self.error_count = 0

        if len(argv) <= 1:
            raise UsageRequested(USAGE)

        output_path: str | None = None
        include_directory: str | None = None
        verbose = False
        filenames: list[str] = []

        i = 1
        while i < len(argv):
            arg = argv[i]

            if arg in VERBOSE_FLAGS:
                verbose = True
                i += 1
                continue

            if arg in OUTPUT_FLAGS:
                if i + 1 >= len(argv):
                    self._fail(MissingOptionValueError(arg, "filename"))
                value = argv[i + 1]
                if output_path is not None:
                    self._fail(DuplicateOptionError("Output", value))
                if not value:
                    self._fail(MissingOptionValueError(arg, "filename"))
                output_path = value
                logger.debug("option_parsed", option="output", value=value)
                i += 2
                continue

            if arg in INCLUDE_DIR_FLAGS:
                if i + 1 >= len(argv):
                    self._fail(MissingOptionValueError(arg, "directory path"))
                value = argv[i + 1]
                if include_directory is not None:
                    self._fail(DuplicateOptionError("Include directory", value))
                self._check_include_directory(value)
                include_directory = value
                logger.debug("option_parsed", option="include_dir", value=value)
                i += 2
                continue

            if not arg.startswith("-"):
                filenames.append(arg)
                i += 1
                continue

            self._fail(UnknownOptionError(arg))

        include_directory_explicitly_set = include_directory is not None
        if include_directory is None:
            include_directory = DEFAULT_INCLUDE_DIRECTORY

        if not filenames:
            self._fail(MissingInputError())

        output_explicitly_set = output_path is not None
        if output_path is None:
            output_path = self.name_deriver(filenames[0])
            if not output_path:
                self._fail(OutputNameError(filenames[0]))

        files = self._create_file_states(filenames)

        config = CompilerConfiguration(
            output_path=output_path,
            include_directory=include_directory,
            verbose=verbose,
            output_explicitly_set=output_explicitly_set,
            include_directory_explicitly_set=include_directory_explicitly_set,
            error_count=self.error_count,
            files=files,
        )
        logger.debug(
            "configuration_resolved",
            output_path=config.output_path,
            include_directory=config.include_directory,
            files=len(config.files),
        )
        return config

    def _check_include_directory(self, path: str) -> None:
        """Validate that an include directory exists and is a directory."""
        if not os.path.exists(path):
            self._fail(IncludeDirectoryError(path, IncludeDirectoryError.DOES_NOT_EXIST))
        if not os.path.isdir(path):
            self._fail(IncludeDirectoryError(path, IncludeDirectoryError.NOT_A_DIRECTORY))

    def _create_file_states(self, filenames: list[str]) -> list[FileState]:
        """Build the per-file states in order, releasing them all on failure."""
        files: list[FileState] = []
        for filename in filenames:
            state = self.file_state_factory(filename)
            if state is None:
                for created in files:
                    created.release()
                self._fail(FileStateError(filename))
            files.append(state)
        return files

    def _fail(self, err: ResolutionError) -> NoReturn:
        """Count a diagnostic and abort resolution with it."""
        self.error_count += 1
        err.error_count = self.error_count
        logger.debug(
            "resolution_failed",
            error_type=err.__class__.__name__,
            message=err.user_message,
        )
        raise err


def resolve(argv: Sequence[str]) -> CompilerConfiguration:
    """Resolve an argument vector with the default collaborators.

    Args:
        argv: Argument vector including the program name at index 0.

    Returns:
        The resolved CompilerConfiguration.

    Raises:
        UsageRequested: If argv holds nothing beyond the program name.
        ResolutionError: On the first invalid argument or failed input.
    """
    return ConfigurationResolver().resolve(argv)

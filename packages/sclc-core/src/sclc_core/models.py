"""Resolved compiler configuration for sclc.

CompilerConfiguration is the output of argument resolution and the input of
the rest of the compilation pipeline. It exclusively owns the per-file
states it holds and releases them together in close().
"""

from __future__ import annotations

from types import TracebackType

import structlog
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from sclc_core.file_state import FileState
from sclc_core.settings import DEFAULT_INCLUDE_DIRECTORY

logger = structlog.get_logger(__name__)


class CompilerConfiguration(BaseModel):
    """Fully resolved build configuration.

    Attributes:
        output_path: Base name of the output artifact (e.g. "build/out").
        include_directory: Directory used to resolve includes.
        verbose: Whether progress messages are printed.
        output_explicitly_set: True iff the user passed -o/--output.
        include_directory_explicitly_set: True iff the user passed -i/--include_dir.
        error_count: Diagnostics emitted while resolving.
        files: Per-file states, in command-line order.

    Example:
        >>> with resolve(["sclc", "main.sc"]) as config:
        ...     config.output_path
        'main'
    """

    model_config = ConfigDict(extra="forbid")

    output_path: str = Field(
        ...,
        min_length=1,
        description="Base name of the output artifact",
    )
    include_directory: str = Field(
        default=DEFAULT_INCLUDE_DIRECTORY,
        min_length=1,
        description="Include search directory",
    )
    verbose: bool = Field(
        default=False,
        description="Print progress messages for the compilation stages",
    )
    output_explicitly_set: bool = Field(
        default=False,
        description="Whether the output path came from the command line",
    )
    include_directory_explicitly_set: bool = Field(
        default=False,
        description="Whether the include directory came from the command line",
    )
    error_count: int = Field(
        default=0,
        ge=0,
        description="Number of diagnostics emitted during resolution",
    )
    files: list[FileState] = Field(
        ...,
        min_length=1,
        description="Per-file compilation states in command-line order",
    )

    _closed: bool = PrivateAttr(default=False)

    @property
    def closed(self) -> bool:
        """Whether close() has already torn this configuration down."""
        return self._closed

    @property
    def filenames(self) -> list[str]:
        """Input filenames in command-line order."""
        return [f.path for f in self.files]

    def close(self) -> None:
        """Release every owned file state.

        Teardown happens once; later calls do nothing.
        """
        if self._closed:
            return
        for state in self.files:
            state.release()
        self._closed = True
        logger.debug("configuration_closed", files=len(self.files))

    def __enter__(self) -> CompilerConfiguration:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

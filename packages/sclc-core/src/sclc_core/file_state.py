"""Per-file compilation state for sclc.

A FileState owns one input filename and the source text loaded from it.
Lexing, parsing and code generation build on this state downstream.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger(__name__)

# Encoding used to read source files
SOURCE_ENCODING = "utf-8"


class FileState(BaseModel):
    """Compilation state for a single input file.

    Attributes:
        path: The input filename exactly as given on the command line.
        source: Source text of the file. Emptied by release().
        released: True once the state has been torn down.

    Example:
        >>> state = FileState.load("main.sc")
        >>> state.path
        'main.sc'
        >>> state.release()
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    path: str = Field(
        ...,
        min_length=1,
        description="Input filename as given on the command line",
    )
    source: str = Field(
        default="",
        description="Source text of the input file",
    )
    released: bool = Field(
        default=False,
        description="Whether the state has been released",
    )

    @classmethod
    def load(cls, path: str) -> FileState:
        """Read a source file and build its state.

        Args:
            path: Path to the source file.

        Returns:
            A new FileState holding the file's text.

        Raises:
            OSError: If the file cannot be opened or read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        source = Path(path).read_text(encoding=SOURCE_ENCODING)
        return cls(path=path, source=source)

    def release(self) -> None:
        """Drop the loaded source. Calling it again is a no-op."""
        if self.released:
            return
        self.source = ""
        self.released = True
        logger.debug("file_state_released", path=self.path)


def create_file_state(path: str) -> FileState | None:
    """Create the compilation state for one input file.

    Args:
        path: Path to the source file.

    Returns:
        The new FileState, or None if the file could not be loaded.
    """
    try:
        state = FileState.load(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("file_state_failed", path=path, error=str(e))
        return None

    logger.debug("file_state_created", path=path, size=len(state.source))
    return state

"""Output name derivation for sclc."""

from __future__ import annotations

import os


def derive_output_name(path: str) -> str | None:
    """Derive an output base name from an input source path.

    Strips the directory components and the last extension. A leading dot
    is part of the name, not an extension (".hidden" stays ".hidden").

    Args:
        path: Input source path as given on the command line.

    Returns:
        The base name, or None if nothing is left (e.g. "src/" or "").

    Example:
        >>> derive_output_name("examples/main.sc")
        'main'
        >>> derive_output_name("archive.tar.gz")
        'archive.tar'
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot > 0:
        name = name[:dot]
    return name or None

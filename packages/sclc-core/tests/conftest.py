"""Shared pytest fixtures for sclc-core tests.

This module provides common fixtures used across the unit tests.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    This fixture ensures structlog outputs to stdout so that capsys
    can capture the output in tests.
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def source_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change into an empty temporary directory for the test.

    Returns:
        The temporary directory, which is also the working directory.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_source(source_dir: Path) -> Callable[..., str]:
    """Factory fixture to create source files in the working directory.

    Returns:
        Function that writes a source file and returns its relative path.
    """

    def _write(name: str, content: str = "fn main() {}\n") -> str:
        path = source_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return name

    return _write


@pytest.fixture
def include_dir(source_dir: Path) -> str:
    """Create an include directory in the working directory.

    Returns:
        Relative path of the include directory.
    """
    (source_dir / "include").mkdir()
    return "include"

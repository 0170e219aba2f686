"""Shared test fixtures for sclc-cli tests.

Provides CliRunner fixtures and source file helpers for testing CLI commands.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Point structlog at the current stdout outside CLI invocations.

    Commands reconfigure logging for the runner's streams; this resets it so
    errors constructed directly in tests never write to a closed stream.
    """
    structlog.configure(
        processors=[structlog.dev.ConsoleRenderer(colors=False)],
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    This fixture creates a temporary directory and changes to it
    for the duration of the test.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def create_source(isolated_runner: CliRunner) -> Callable[..., Path]:
    """Factory fixture to create source files in the isolated filesystem.

    Args:
        isolated_runner: CliRunner with isolated filesystem.

    Returns:
        Function that creates a source file with given content.
    """

    def _create(filename: str, content: str = "fn main() {}\n") -> Path:
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _create

"""Unit tests for CompilerConfiguration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sclc_core.file_state import FileState
from sclc_core.models import CompilerConfiguration


def make_config(*paths: str, **overrides: object) -> CompilerConfiguration:
    """Build a configuration holding in-memory file states."""
    files = [FileState(path=p, source=p) for p in paths or ("main.sc",)]
    values: dict[str, object] = {"output_path": "main", "files": files}
    values.update(overrides)
    return CompilerConfiguration(**values)  # type: ignore[arg-type]


class TestCompilerConfigurationFields:
    """Tests for field defaults and constraints."""

    def test_defaults(self) -> None:
        """Optional fields take their documented defaults."""
        config = make_config()

        assert config.include_directory == "."
        assert config.verbose is False
        assert config.output_explicitly_set is False
        assert config.include_directory_explicitly_set is False
        assert config.error_count == 0
        assert config.closed is False

    def test_files_required(self) -> None:
        """A configuration without inputs is invalid."""
        with pytest.raises(ValidationError):
            CompilerConfiguration(output_path="main", files=[])

    def test_output_path_not_empty(self) -> None:
        """The output name cannot be empty."""
        with pytest.raises(ValidationError):
            make_config(output_path="")

    def test_include_directory_not_empty(self) -> None:
        """The include directory cannot be empty."""
        with pytest.raises(ValidationError):
            make_config(include_directory="")

    def test_error_count_non_negative(self) -> None:
        """The diagnostic counter never goes below zero."""
        with pytest.raises(ValidationError):
            make_config(error_count=-1)

    def test_filenames_in_order(self) -> None:
        """filenames mirrors the order of files."""
        config = make_config("b.sc", "a.sc")
        assert config.filenames == ["b.sc", "a.sc"]


class TestCompilerConfigurationTeardown:
    """Tests for close() and the context manager."""

    def test_close_releases_all_files(self) -> None:
        """close() releases every owned state."""
        config = make_config("a.sc", "b.sc")

        config.close()

        assert config.closed is True
        assert all(f.released for f in config.files)

    def test_close_is_idempotent(self) -> None:
        """Teardown happens once."""
        config = make_config()
        config.close()
        config.close()
        assert config.closed is True

    def test_context_manager_closes(self) -> None:
        """Leaving the with-block tears the configuration down."""
        with make_config("a.sc") as config:
            assert config.closed is False

        assert config.closed is True
        assert config.files[0].released is True

    def test_context_manager_closes_on_error(self) -> None:
        """Teardown also runs when the pipeline raises."""
        config = make_config("a.sc")

        with pytest.raises(RuntimeError), config:
            raise RuntimeError("codegen failed")

        assert config.closed is True

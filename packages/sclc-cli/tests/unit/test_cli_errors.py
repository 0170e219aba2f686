"""Unit tests for sclc_cli.errors module."""

from __future__ import annotations

import pytest

from sclc_cli import output
from sclc_cli.errors import EXIT_FAILURE, EXIT_SUCCESS, CLIError, handle_sclc_error
from sclc_core.errors import AssemblerError, IncludeDirectoryError, UnknownOptionError


class TestCLIError:
    """Tests for CLIError exception."""

    def test_cli_error_message(self) -> None:
        """Test CLIError stores message correctly."""
        error = CLIError("Test error message")
        assert error.message == "Test error message"
        assert str(error) == "Test error message"

    def test_cli_error_default_exit_code(self) -> None:
        """Test CLIError has default exit code of 1."""
        assert CLIError("Test error").exit_code == EXIT_FAILURE

    def test_cli_error_custom_exit_code(self) -> None:
        """Test CLIError accepts custom exit code."""
        assert CLIError("Test error", exit_code=EXIT_SUCCESS).exit_code == EXIT_SUCCESS

    def test_show_writes_to_stderr(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """show() prints the diagnostic on the error stream."""
        monkeypatch.setattr(output, "err_console", output.create_console(no_color=True, stderr=True))

        CLIError("Unknown option: -x").show()

        captured = capsys.readouterr()
        assert "Unknown option: -x" in captured.err
        assert captured.out == ""


class TestHandleSclcError:
    """Tests for handle_sclc_error function."""

    def test_resolution_error_message_unchanged(self) -> None:
        """The core message becomes the CLI message verbatim."""
        with pytest.raises(CLIError) as exc_info:
            handle_sclc_error(UnknownOptionError("-x"))

        assert exc_info.value.message == "Unknown option: -x"
        assert exc_info.value.exit_code == EXIT_FAILURE

    def test_keeps_distinguishing_detail(self) -> None:
        """Which include directory check failed stays visible."""
        with pytest.raises(CLIError) as exc_info:
            handle_sclc_error(
                IncludeDirectoryError("inc", IncludeDirectoryError.NOT_A_DIRECTORY)
            )

        assert "is not a directory" in exc_info.value.message

    def test_chains_original_error(self) -> None:
        """The core error is kept as the cause."""
        original = AssemblerError("Assembly failed with code 1", returncode=1)

        with pytest.raises(CLIError) as exc_info:
            handle_sclc_error(original)

        assert exc_info.value.__cause__ is original

"""Custom exception hierarchy for sclc-core.

This module defines the exception classes raised by the compiler driver:
- SclcError: Base exception for all sclc-related errors
- ResolutionError: Raised when command-line arguments cannot be resolved
  into a CompilerConfiguration (one subclass per diagnostic kind)
- AssemblerError: Raised when the external assembler fails
- UsageRequested: Raised when no arguments were given at all

Each fatal condition is its own exception type so callers can decide how to
terminate. The user_message of every error is the exact diagnostic text shown
on the error stream; technical details are logged internally via structlog.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class SclcError(Exception):
    """Base exception for sclc.

    Args:
        user_message: Message to display to the user on the error stream.
        internal_details: Optional technical details for logging. This is
            logged internally but never shown as the diagnostic.

    Example:
        >>> raise SclcError(
        ...     "Failed to create fstate for: main.sc",
        ...     internal_details="[Errno 13] Permission denied: 'main.sc'",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize SclcError with user message and optional internal details.

        Args:
            user_message: Message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details

        if internal_details:
            logger.debug(
                "sclc_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class UsageRequested(Exception):
    """Raised when the driver is invoked without any arguments.

    This is the "help" outcome rather than an error: the caller prints the
    usage banner to standard output and still exits with status 1.

    Attributes:
        usage: The usage banner text.
    """

    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage = usage


class ResolutionError(SclcError):
    """Raised when arguments cannot be resolved into a configuration.

    Resolution is fail-fast, so the first diagnostic aborts it. The resolver
    records how many diagnostics it emitted before giving up.

    Attributes:
        error_count: Diagnostics emitted by the resolver, this one included.
    """

    error_count: int = 0


class MissingOptionValueError(ResolutionError):
    """Raised when a flag that takes a value is the last argument.

    Attributes:
        flag: The flag exactly as typed (e.g. "-o" or "--include_dir").
    """

    def __init__(self, flag: str, value_name: str = "filename") -> None:
        super().__init__(f"Missing {value_name} after {flag}")
        self.flag = flag
        self.value_name = value_name


class DuplicateOptionError(ResolutionError):
    """Raised when --output or --include_dir is given more than once.

    Attributes:
        option: Human-readable option name ("Output", "Include directory").
        value: The value of the second, rejected occurrence.
    """

    def __init__(self, option: str, value: str) -> None:
        super().__init__(f"{option} specified more than once: {value}")
        self.option = option
        self.value = value


class IncludeDirectoryError(ResolutionError):
    """Raised when the include directory fails filesystem validation.

    Attributes:
        path: The include directory argument.
        reason: Either DOES_NOT_EXIST or NOT_A_DIRECTORY.
    """

    DOES_NOT_EXIST = "does not exist"
    NOT_A_DIRECTORY = "is not a directory"

    def __init__(self, path: str, reason: str) -> None:
        if reason == self.DOES_NOT_EXIST:
            message = f"Include directory does not exist: {path}"
        elif reason == self.NOT_A_DIRECTORY:
            message = f"Path is not a directory: {path}"
        else:
            raise ValueError(f"Unknown include directory failure: {reason}")

        super().__init__(message)
        self.path = path
        self.reason = reason


class UnknownOptionError(ResolutionError):
    """Raised for any dash-prefixed token that is not a recognized flag.

    Attributes:
        token: The rejected argument.
    """

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown option: {token}")
        self.token = token


class MissingInputError(ResolutionError):
    """Raised when no positional input filename was given."""

    def __init__(self) -> None:
        super().__init__("Missing input filename")


class OutputNameError(ResolutionError):
    """Raised when no output name can be derived from the first input.

    Attributes:
        filename: The input filename the derivation was attempted on.
    """

    def __init__(self, filename: str) -> None:
        super().__init__(
            "Failed to extract filename.",
            internal_details=f"No base name could be derived from {filename!r}",
        )
        self.filename = filename


class FileStateError(ResolutionError):
    """Raised when the per-file compilation state cannot be created.

    Attributes:
        filename: The input file that could not be loaded.
    """

    def __init__(self, filename: str, *, internal_details: str | None = None) -> None:
        super().__init__(
            f"Failed to create fstate for: {filename}",
            internal_details=internal_details,
        )
        self.filename = filename


class AssemblerError(SclcError):
    """Raised when the external assembler cannot produce the object file.

    Attributes:
        returncode: Exit status of the assembler, or None if it never ran.
    """

    def __init__(
        self,
        user_message: str,
        *,
        returncode: int | None = None,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message, internal_details=internal_details)
        self.returncode = returncode

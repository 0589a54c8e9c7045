"""Exception hierarchy for api-doc-report.

Every error carries an ``exit_code``; the CLI catches :class:`ReportError`,
prints the message and exits with that code.

    ReportError            (exit 1)
    +-- ConfigError        (exit 1)
    +-- InputNotFoundError (exit 3)
    +-- InputUnreadableError (exit 4)
    +-- SpecParseError     (exit 5)
    +-- OutputWriteError   (exit 6)
"""

from api_doc_report.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INPUT_NOT_FOUND,
    EXIT_INPUT_UNREADABLE,
    EXIT_OUTPUT_WRITE_ERROR,
    EXIT_SPEC_PARSE_ERROR,
)


class ReportError(Exception):
    """Base exception for all api-doc-report errors."""

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(ReportError):
    """Raised when a config file cannot be read or has invalid values."""


class InputNotFoundError(ReportError):
    """Raised when the specification file does not exist."""

    exit_code = EXIT_INPUT_NOT_FOUND


class InputUnreadableError(ReportError):
    """Raised when the specification path exists but cannot be read as text."""

    exit_code = EXIT_INPUT_UNREADABLE


class SpecParseError(ReportError):
    """Raised when the document is not parseable, or has diagnostics in strict mode."""

    exit_code = EXIT_SPEC_PARSE_ERROR

    def __init__(self, message: str, diagnostics: list | None = None):
        super().__init__(message)
        self.diagnostics = diagnostics or []


class OutputWriteError(ReportError):
    """Raised when the report cannot be written to the destination path."""

    exit_code = EXIT_OUTPUT_WRITE_ERROR

"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization by pipeline stage.

    Categories:
        LEXICAL: Tokenizer failure (malformed token)
        STRUCTURAL: Parser failure (grammar violation)
        IO: Catalog file could not be read
    """

    LEXICAL = "lexical"
    STRUCTURAL = "structural"
    IO = "io"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lexical errors (tokenizer)
        2000-2999: Structural errors (parser)
        3000-3999: I/O errors (file facade)
    """

    # Lexical errors (1000-1999)
    UNKNOWN_KEYWORD = 1001
    MISSING_SPACE_AFTER_KEYWORD = 1002
    UNTERMINATED_STRING = 1003
    UNSUPPORTED_ESCAPE = 1004
    INVALID_PLURAL_INDEX = 1005

    # Structural errors (2000-2999)
    EXPECTED_STRING = 2001
    EXPECTED_MSGID = 2002
    EXPECTED_MSGSTR = 2003
    EXPECTED_PLURAL_MSGSTR = 2004
    PLURAL_INDEX_WITHOUT_PLURAL = 2005
    PLURAL_INDEX_ORDER = 2006
    MIXED_OBSOLETE = 2007
    DANGLING_COMMENT = 2008

    # I/O errors (3000-3999)
    FILE_READ_FAILED = 3001

    @property
    def category(self) -> ErrorCategory:
        """Pipeline stage this code belongs to."""
        if self.value < 2000:
            return ErrorCategory.LEXICAL
        if self.value < 3000:
            return ErrorCategory.STRUCTURAL
        return ErrorCategory.IO


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, CI annotations).

    Attributes:
        code: Unique error code
        message: Human-readable error description (the ``reason``)
        line: 1-based source line (None for I/O errors)
        hint: Suggestion for fixing the error
        file: Catalog path, when known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    line: int | None = None
    hint: str | None = None
    file: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __post_init__(self) -> None:
        """Validate Diagnostic invariants.

        Raises:
            ValueError: If line is less than 1 (lines are 1-indexed).
        """
        if self.line is not None and self.line < 1:
            msg = f"Diagnostic.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def with_file(self, file: str) -> "Diagnostic":
        """Return a copy of this diagnostic attributed to ``file``."""
        return Diagnostic(
            code=self.code,
            message=self.message,
            line=self.line,
            hint=self.hint,
            file=file,
            severity=self.severity,
        )

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNKNOWN_KEYWORD]: unknown keyword 'foo'
              --> line 1
              = help: Statements start with msgid, msgid_plural, msgstr or msgctxt

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

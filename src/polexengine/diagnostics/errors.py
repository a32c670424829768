"""PO exception hierarchy with structured diagnostics.

The tokenizer and parser never raise; they return ``Err`` values. These
exceptions exist for the ``*_or_raise`` facade functions, which convert an
error value into something callers can ``except``.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["PoError", "PoFileError", "PoSyntaxError"]


class PoError(Exception):
    """Base exception for all PO errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PoError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class PoSyntaxError(PoError):
    """Lexical or structural error in PO source.

    ``str(error)`` renders editor-style: ``"3: unterminated string"``, or
    ``"messages.po:3: unterminated string"`` when the file is known.

    Attributes:
        line: 1-based line of the error
        reason: Human-readable message without location
        file: Catalog path, or None when parsing a string
    """

    def __init__(
        self,
        *,
        line: int,
        reason: str,
        file: str | None = None,
        diagnostic: Diagnostic | None = None,
    ) -> None:
        """Initialize PoSyntaxError.

        Args:
            line: 1-based line of the error
            reason: Human-readable message
            file: Catalog path (optional)
            diagnostic: Structured diagnostic carried over from the Err value
        """
        location = f"{file}:{line}" if file is not None else str(line)
        super().__init__(f"{location}: {reason}")
        self.diagnostic = diagnostic
        self.line = line
        self.reason = reason
        self.file = file


class PoFileError(PoError):
    """Catalog file could not be read.

    Raised from the underlying ``OSError`` (available as ``__cause__``).

    Attributes:
        path: Human-readable catalog path
        reason: Lowercase errno name, e.g. ``"enoent"``
    """

    def __init__(self, message: str | Diagnostic, *, path: str, reason: str) -> None:
        """Initialize PoFileError.

        Args:
            message: Error message string OR Diagnostic object
            path: Catalog path
            reason: Lowercase errno name
        """
        super().__init__(message)
        self.path = path
        self.reason = reason

"""Diagnostic system for PO errors.

Provides structured error diagnostics with codes, line numbers and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import PoError, PoFileError, PoSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "OutputFormat",
    "PoError",
    "PoFileError",
    "PoSyntaxError",
]

"""Primitive scanners for the PO tokenizer.

This module provides low-level scanners for string literals and plural
form indices. Each scanner takes a Cursor positioned at the construct and
returns either a ParseResult with the decoded value or an Err.
"""

from polexengine.constants import ESCAPE_SEQUENCES, MAX_PLURAL_INDEX_DIGITS
from polexengine.diagnostics import ErrorTemplate
from polexengine.syntax.cursor import Cursor, ParseResult
from polexengine.syntax.result import Err

__all__ = ["scan_plural_index", "scan_string_literal"]

# ASCII digits only. str.isdigit() accepts Unicode digits like ² that int() rejects.
_ASCII_DIGITS: str = "0123456789"


def scan_string_literal(cursor: Cursor) -> ParseResult[str] | Err:
    """Scan a double-quoted string literal, decoding escapes.

    Strings never span lines: reaching the end of the line before the
    closing quote is an unterminated string.

    Examples:
        "hello"        → hello
        "say \\"hi\\""   → say "hi"
        "a\\nb"         → a<LF>b

    Args:
        cursor: Positioned at the opening quote

    Returns:
        ParseResult(decoded string, cursor after closing quote), or
        Err for an unterminated string or unsupported escape
    """
    line = cursor.line
    cursor = cursor.advance()  # Skip opening quote
    chunks: list[str] = []
    chunk_start = cursor.pos

    while not cursor.is_eof:
        ch = cursor.current
        if ch == '"':
            chunks.append(cursor.source[chunk_start : cursor.pos])
            return ParseResult("".join(chunks), cursor.advance())
        if ch == "\\":
            chunks.append(cursor.source[chunk_start : cursor.pos])
            escaped = cursor.peek(1)
            if escaped is None or escaped not in ESCAPE_SEQUENCES:
                return Err.from_diagnostic(
                    ErrorTemplate.unsupported_escape(escaped or "", line)
                )
            chunks.append(ESCAPE_SEQUENCES[escaped])
            cursor = cursor.advance(2)
            chunk_start = cursor.pos
            continue
        cursor = cursor.advance()

    return Err.from_diagnostic(ErrorTemplate.unterminated_string(line))


def scan_plural_index(cursor: Cursor) -> ParseResult[int] | Err:
    """Scan the ``[N]`` suffix of ``msgstr[N]``.

    Args:
        cursor: Positioned at the opening bracket

    Returns:
        ParseResult(index, cursor after closing bracket), or Err when the
        bracket is empty, holds a non-digit or an overlong number,
        or is never closed
    """
    cursor = cursor.advance()  # Skip '['
    start = cursor

    while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
        cursor = cursor.advance()

    digits = start.slice_to(cursor.pos)
    if len(digits) > MAX_PLURAL_INDEX_DIGITS:
        return Err.from_diagnostic(ErrorTemplate.invalid_plural_index(start.line))
    if not digits or cursor.is_eof or cursor.current != "]":
        return Err.from_diagnostic(ErrorTemplate.invalid_plural_index(cursor.line))

    return ParseResult(int(digits), cursor.advance())

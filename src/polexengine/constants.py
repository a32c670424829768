"""Shared constants for POLexEngine.

This module provides centralized configuration constants used across
the syntax layer and the file-reading facade. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Encoding: Default text encoding for catalog files
- Lexical tables: Escape sequences and comment sigils

Python 3.13+. Zero external dependencies.
"""

from polexengine.enums import CommentType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    "MAX_PLURAL_INDEX_DIGITS",
    # Encoding
    "DEFAULT_ENCODING",
    # Lexical tables
    "ESCAPE_SEQUENCES",
    "COMMENT_SIGILS",
    "OBSOLETE_SIGIL",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Prevents DoS attacks via unbounded memory allocation from large PO files.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Longest digit run accepted inside msgstr[N].
# Keeps int() below the interpreter's integer string conversion limit.
MAX_PLURAL_INDEX_DIGITS: int = 6

# ============================================================================
# ENCODING
# ============================================================================

# PO files produced by xgettext/msgmerge are UTF-8 in practice.
DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# LEXICAL TABLES
# ============================================================================

# Character following a backslash -> decoded character.
ESCAPE_SEQUENCES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

# Character following '#' -> comment type. Anything else is a translator comment.
COMMENT_SIGILS: dict[str, CommentType] = {
    ".": CommentType.EXTRACTED,
    ":": CommentType.REFERENCE,
    ",": CommentType.FLAG,
    "|": CommentType.PREVIOUS,
}

# '#~' marks an obsolete statement; the rest of the line is tokenized normally.
OBSOLETE_SIGIL: str = "~"

"""PO syntax package.

Provides the tokenizer, parser, token and entry definitions, and the
tagged results both stages return. Separate from the file-reading facade
to enable tooling (linters, editors) that already holds the text.

Python 3.13+.
"""

from .ast import Entry, PluralTranslation, Translation
from .cursor import Cursor, ParseResult
from .parser import parse
from .result import Err, IOFailure, Ok, Result
from .tokenizer import tokenize
from .tokens import (
    CommentToken,
    EndToken,
    KeywordToken,
    PluralIndexToken,
    StringToken,
    Token,
)

__all__ = [
    "CommentToken",
    "Cursor",
    "EndToken",
    "Entry",
    "Err",
    "IOFailure",
    "KeywordToken",
    "Ok",
    "ParseResult",
    "PluralIndexToken",
    "PluralTranslation",
    "Result",
    "StringToken",
    "Token",
    "Translation",
    "parse",
    "tokenize",
]

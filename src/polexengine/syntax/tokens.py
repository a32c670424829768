"""Token types produced by the tokenizer.

``Token`` is a closed union of frozen dataclasses, so the parser can dispatch
exhaustively with ``match``. Every token records the 1-based line it started
on; that number is used verbatim in error messages.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from polexengine.enums import CommentType, KeywordType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "KeywordToken",
    "PluralIndexToken",
    "StringToken",
    "CommentToken",
    "EndToken",
    "Token",
    "describe_token",
]


@dataclass(frozen=True, slots=True)
class KeywordToken:
    """Statement keyword: msgid, msgid_plural, msgstr, msgctxt."""

    keyword: KeywordType
    line: int
    obsolete: bool = False


@dataclass(frozen=True, slots=True)
class PluralIndexToken:
    """The ``[N]`` of ``msgstr[N]``; always follows a msgstr KeywordToken."""

    index: int
    line: int
    obsolete: bool = False


@dataclass(frozen=True, slots=True)
class StringToken:
    """String literal with escapes already decoded."""

    value: str
    line: int
    obsolete: bool = False


@dataclass(frozen=True, slots=True)
class CommentToken:
    """Comment line.

    Attributes:
        type: Comment type selected by the sigil after '#'
        text: Rest of the line after the sigil, one leading space removed
        line: Source line
        obsolete: True for comments written after '#~'
    """

    type: CommentType
    text: str
    line: int
    obsolete: bool = False


@dataclass(frozen=True, slots=True)
class EndToken:
    """End of input. Always the last token of a successful tokenize()."""

    line: int


type Token = KeywordToken | PluralIndexToken | StringToken | CommentToken | EndToken


def describe_token(token: Token) -> str:
    """Short human-readable description of a token for hints.

    Example:
        >>> describe_token(KeywordToken(KeywordType.MSGSTR, 3))
        'msgstr'
        >>> describe_token(StringToken("hi", 1))
        'string "hi"'
    """
    match token:
        case KeywordToken(keyword=keyword):
            return str(keyword)
        case PluralIndexToken(index=index):
            return f"[{index}]"
        case StringToken(value=value):
            return f'string "{value}"'
        case CommentToken(type=comment_type):
            return f"{comment_type} comment"
        case EndToken():
            return "end of input"

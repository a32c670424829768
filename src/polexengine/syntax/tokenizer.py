"""PO tokenizer.

Turns catalog text into a flat tuple of tokens (see
:mod:`polexengine.syntax.tokens`), failing fast on the first lexical error.

Scanning is line oriented: the text is split on ``\\n`` and each physical
line is scanned with its own :class:`~polexengine.syntax.cursor.Cursor`,
whose ``line`` attribute is stamped onto every token it produces.

Recognized per line, after leading whitespace:

- ``#`` comments, typed by the character after the hash
  (``#.`` ``#:`` ``#,`` ``#|`` or plain ``#``)
- ``#~`` obsolete marker: the rest of the line is tokenized again, with
  every resulting token flagged ``obsolete``
- keywords ``msgid``, ``msgid_plural``, ``msgstr``, ``msgstr[N]``, ``msgctxt``
- double-quoted string literals, any number per line

Adjacent string literals are NOT merged here. Which keyword owns a run of
strings is a grammar question, answered by the parser.
"""

from polexengine.constants import COMMENT_SIGILS, OBSOLETE_SIGIL
from polexengine.diagnostics import ErrorTemplate
from polexengine.enums import CommentType, KeywordType
from polexengine.syntax.cursor import Cursor
from polexengine.syntax.primitives import scan_plural_index, scan_string_literal
from polexengine.syntax.result import Err, Ok, Result
from polexengine.syntax.tokens import (
    CommentToken,
    EndToken,
    KeywordToken,
    PluralIndexToken,
    StringToken,
    Token,
)

__all__ = ["tokenize"]

# Longest first: "msgid" is a prefix of "msgid_plural".
_KEYWORDS: tuple[KeywordType, ...] = tuple(
    sorted(KeywordType, key=len, reverse=True)
)

_PLURAL_MSGSTR_PREFIX = f"{KeywordType.MSGSTR}["

# Byte order mark some editors prepend to UTF-8 files.
_BOM = "\ufeff"


def tokenize(text: str) -> Result[tuple[Token, ...]]:
    """Tokenize PO source text.

    Args:
        text: Complete catalog source

    Returns:
        Ok(tokens) ending with an EndToken, or Err(line, reason) for the
        first lexical error

    Example:
        >>> tokenize('msgid "foo"\\nmsgstr "bar"\\n')
        Ok(value=(KeywordToken(keyword=<KeywordType.MSGID: 'msgid'>, line=1, ...), ...))
        >>> tokenize("foo")
        Err(line=1, reason="unknown keyword 'foo'")
    """
    tokens: list[Token] = []
    lines = text.removeprefix(_BOM).split("\n")
    last_line = len(lines)

    for line, source in enumerate(lines, start=1):
        error = _tokenize_line(
            Cursor(source, 0, line),
            tokens,
            obsolete=False,
            newline_follows=line < last_line,
        )
        if error is not None:
            return error

    tokens.append(EndToken(last_line))
    return Ok(tuple(tokens))


def _tokenize_line(
    cursor: Cursor,
    tokens: list[Token],
    *,
    obsolete: bool,
    newline_follows: bool,
) -> Err | None:
    """Tokenize the remainder of one line into ``tokens``.

    Returns:
        None on success, Err on the first lexical error
    """
    while True:
        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            return None

        if cursor.current == "#":
            return _tokenize_comment(
                cursor, tokens, obsolete=obsolete, newline_follows=newline_follows
            )

        if cursor.current == '"':
            string = scan_string_literal(cursor)
            if isinstance(string, Err):
                return string
            tokens.append(StringToken(string.value, cursor.line, obsolete))
            cursor = string.cursor
            continue

        keyword = _scan_keyword(
            cursor, tokens, obsolete=obsolete, newline_follows=newline_follows
        )
        if isinstance(keyword, Err):
            return keyword
        cursor = keyword


def _tokenize_comment(
    cursor: Cursor,
    tokens: list[Token],
    *,
    obsolete: bool,
    newline_follows: bool,
) -> Err | None:
    """Tokenize a comment occupying the rest of the line."""
    sigil = cursor.peek(1)

    if sigil == OBSOLETE_SIGIL:
        remainder = cursor.advance(2)
        if remainder.peek() == "|":
            tokens.append(_comment(CommentType.PREVIOUS, remainder.advance(), obsolete=True))
            return None
        return _tokenize_line(
            remainder, tokens, obsolete=True, newline_follows=newline_follows
        )

    if sigil is not None and sigil in COMMENT_SIGILS:
        tokens.append(_comment(COMMENT_SIGILS[sigil], cursor.advance(2), obsolete=obsolete))
    else:
        tokens.append(_comment(CommentType.TRANSLATOR, cursor.advance(), obsolete=obsolete))
    return None


def _comment(comment_type: CommentType, cursor: Cursor, *, obsolete: bool) -> CommentToken:
    text = cursor.rest().removesuffix("\r").removeprefix(" ")
    return CommentToken(comment_type, text, cursor.line, obsolete)


def _scan_keyword(
    cursor: Cursor,
    tokens: list[Token],
    *,
    obsolete: bool,
    newline_follows: bool,
) -> Cursor | Err:
    """Scan a keyword (and plural index) and the whitespace it requires.

    Returns:
        Cursor after the keyword, or Err for an unknown word, a malformed
        plural index, or a keyword glued to what follows it
    """
    line = cursor.line

    if cursor.startswith(_PLURAL_MSGSTR_PREFIX):
        index = scan_plural_index(cursor.advance(len(KeywordType.MSGSTR)))
        if isinstance(index, Err):
            return index
        if not _space_follows(index.cursor, newline_follows):
            written = f"{KeywordType.MSGSTR}[{index.value}]"
            return Err.from_diagnostic(ErrorTemplate.missing_space(written, line))
        tokens.append(KeywordToken(KeywordType.MSGSTR, line, obsolete))
        tokens.append(PluralIndexToken(index.value, line, obsolete))
        return index.cursor

    for keyword in _KEYWORDS:
        if cursor.startswith(keyword):
            after = cursor.advance(len(keyword))
            if not _space_follows(after, newline_follows):
                return Err.from_diagnostic(ErrorTemplate.missing_space(keyword, line))
            tokens.append(KeywordToken(keyword, line, obsolete))
            return after

    return Err.from_diagnostic(ErrorTemplate.unknown_keyword(cursor.next_word(), line))


def _space_follows(cursor: Cursor, newline_follows: bool) -> bool:
    """Whitespace (including the line's own newline) follows the cursor."""
    if cursor.is_eof:
        return newline_follows
    return cursor.at_whitespace_or_eof()

"""Core PO parser implementation.

This module provides the entry loop that turns a token sequence from
:func:`polexengine.syntax.tokenizer.tokenize` into translation entries
defined in :mod:`polexengine.syntax.ast`.

Architecture:
    A :class:`~polexengine.syntax.parser.rules.TokenStream` walks the
    tokens. Each iteration gathers the run of comments ahead of an entry
    and hands both to :func:`~polexengine.syntax.parser.rules.parse_entry`.
    The first Err from any rule ends the parse; there is no recovery and
    no partial result.

See Also:
    - :mod:`polexengine.syntax.parser.rules` - Grammar rules
    - :mod:`polexengine.syntax.tokens` - Token types
"""

from collections.abc import Sequence

from polexengine.diagnostics import ErrorTemplate
from polexengine.syntax.ast import Entry
from polexengine.syntax.parser.rules import TokenStream, parse_comments, parse_entry
from polexengine.syntax.result import Err, Ok, Result
from polexengine.syntax.tokens import EndToken, Token

__all__ = ["parse"]


def parse(tokens: Sequence[Token]) -> Result[tuple[Entry, ...]]:
    """Parse a token sequence into translation entries.

    Args:
        tokens: Output of tokenize(); must end with an EndToken

    Returns:
        Ok(entries) in source order, or Err(line, reason) for the first
        structural error

    Raises:
        ValueError: If the sequence does not end with an EndToken
            (a caller bug, not a syntax error)

    Example:
        >>> match tokenize('msgid "foo"\\nmsgstr "bar"\\n'):
        ...     case Ok(tokens):
        ...         parse(tokens)
        Ok(value=(Translation(msgid='foo', msgstr='bar', ...),))
    """
    stream = TokenStream(tokens)
    entries: list[Entry] = []

    while True:
        comments = parse_comments(stream)

        if isinstance(stream.peek(), EndToken):
            if comments:
                return Err.from_diagnostic(ErrorTemplate.dangling_comment(comments[0].line))
            return Ok(tuple(entries))

        entry = parse_entry(stream, comments)
        if isinstance(entry, Err):
            return entry
        entries.append(entry)

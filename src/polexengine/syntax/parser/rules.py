"""Grammar rules for PO translations.

Each rule consumes tokens from a :class:`TokenStream` and returns the value
it built or an :class:`~polexengine.syntax.result.Err`. Rules never raise.

Grammar (one entry; ``STR+`` is a run of concatenated strings)::

    entry    ::= comment* [msgctxt STR+] msgid STR+ (singular | plural)
    singular ::= msgstr STR+
    plural   ::= msgid_plural STR+ (msgstr "[" N "]" STR+)+

Every statement token of an entry must share the obsolete state of the
entry's first statement.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from polexengine.diagnostics import ErrorTemplate
from polexengine.enums import CommentType, KeywordType
from polexengine.syntax.ast import Entry, PluralTranslation, Translation
from polexengine.syntax.result import Err
from polexengine.syntax.tokens import (
    CommentToken,
    EndToken,
    KeywordToken,
    PluralIndexToken,
    StringToken,
    Token,
    describe_token,
)

__all__ = [
    "CommentBlock",
    "TokenStream",
    "parse_comments",
    "parse_entry",
    "parse_plural_forms",
    "parse_strings",
]

_ENTRY_START = frozenset({KeywordType.MSGCTXT, KeywordType.MSGID})


class TokenStream:
    """Forward-only reader over a token sequence.

    The only mutable state in the parser; one stream per parse() call.
    The sequence must end with an EndToken, which is never consumed past.
    """

    __slots__ = ("_pos", "_tokens")

    def __init__(self, tokens: Sequence[Token]) -> None:
        if not tokens or not isinstance(tokens[-1], EndToken):
            msg = "Token sequence must end with an EndToken"
            raise ValueError(msg)
        self._tokens = tokens
        self._pos = 0

    def peek(self) -> Token:
        """Current token without consuming it."""
        return self._tokens[self._pos]

    def advance(self) -> Token:
        """Consume and return the current token (EndToken is sticky)."""
        token = self._tokens[self._pos]
        if not isinstance(token, EndToken):
            self._pos += 1
        return token

    def error_line(self, token: Token) -> int:
        """Line to blame when ``token`` is not what the grammar expects.

        End of input has no statement of its own, so errors there point at
        the last consumed token.
        """
        if isinstance(token, EndToken) and self._pos > 0:
            return self._tokens[self._pos - 1].line
        return token.line


@dataclass(frozen=True, slots=True)
class CommentBlock:
    """Comment metadata collected ahead of one entry."""

    comments: tuple[str, ...] = ()
    extracted_comments: tuple[str, ...] = ()
    references: tuple[str, ...] = ()
    flags: frozenset[str] = frozenset()
    previous_msgids: tuple[str, ...] = ()

    @classmethod
    def from_tokens(cls, tokens: Sequence[CommentToken]) -> "CommentBlock":
        """Partition comment tokens by type.

        ``#:`` lines split on whitespace into references and ``#,`` lines
        split on commas into flags; both accumulate across lines.
        """
        comments: list[str] = []
        extracted: list[str] = []
        references: list[str] = []
        flags: set[str] = set()
        previous: list[str] = []

        for token in tokens:
            match token.type:
                case CommentType.TRANSLATOR:
                    comments.append(token.text)
                case CommentType.EXTRACTED:
                    extracted.append(token.text)
                case CommentType.REFERENCE:
                    references.extend(token.text.split())
                case CommentType.FLAG:
                    flags.update(flag.strip() for flag in token.text.split(",") if flag.strip())
                case CommentType.PREVIOUS:
                    previous.append(token.text)

        return cls(
            comments=tuple(comments),
            extracted_comments=tuple(extracted),
            references=tuple(references),
            flags=frozenset(flags),
            previous_msgids=tuple(previous),
        )


def parse_comments(stream: TokenStream) -> list[CommentToken]:
    """Consume the run of comment tokens at the stream position."""
    comments: list[CommentToken] = []
    while isinstance(token := stream.peek(), CommentToken):
        comments.append(token)
        stream.advance()
    return comments


def _check_obsolete(token: Token, obsolete: bool) -> Err | None:
    if isinstance(token, EndToken) or token.obsolete == obsolete:
        return None
    return Err.from_diagnostic(ErrorTemplate.mixed_obsolete(token.line))


def parse_strings(
    stream: TokenStream, owner: str, owner_line: int, *, obsolete: bool
) -> str | Err:
    """Consume one or more string tokens and concatenate them.

    Args:
        stream: Token stream positioned after the owning keyword
        owner: Keyword as written, for the error message (e.g. "msgstr[1]")
        owner_line: Line of the owning keyword
        obsolete: Obsolete state of the entry

    Returns:
        Joined string (no separator), or Err when no string follows
    """
    parts: list[str] = []
    while isinstance(token := stream.peek(), StringToken):
        if (error := _check_obsolete(token, obsolete)) is not None:
            return error
        parts.append(token.value)
        stream.advance()

    if not parts:
        return Err.from_diagnostic(ErrorTemplate.expected_string(owner, owner_line))
    return "".join(parts)


def _is_keyword(token: Token, keyword: KeywordType) -> bool:
    return isinstance(token, KeywordToken) and token.keyword is keyword


def parse_plural_forms(stream: TokenStream, *, obsolete: bool) -> dict[int, str] | Err:
    """Consume ``msgstr[N] STR+`` blocks following msgid_plural.

    Indices must run 0, 1, 2, ... without gaps or repeats. A violation is
    reported at the line of the first msgstr[N] that breaks the sequence.

    Returns:
        Index -> string mapping with at least one entry, or Err
    """
    forms: dict[int, str] = {}

    while _is_keyword(keyword := stream.peek(), KeywordType.MSGSTR):
        if (error := _check_obsolete(keyword, obsolete)) is not None:
            return error
        stream.advance()

        index = stream.peek()
        if not isinstance(index, PluralIndexToken):
            return Err.from_diagnostic(ErrorTemplate.expected_plural_msgstr(keyword.line))
        stream.advance()
        if index.index != len(forms):
            return Err.from_diagnostic(ErrorTemplate.plural_index_order(index.line))

        value = parse_strings(
            stream, f"{KeywordType.MSGSTR}[{index.index}]", index.line, obsolete=obsolete
        )
        if isinstance(value, Err):
            return value
        forms[index.index] = value

    if not forms:
        token = stream.peek()
        return Err.from_diagnostic(ErrorTemplate.expected_plural_msgstr(stream.error_line(token)))
    return forms


def _parse_statement(
    stream: TokenStream, keyword: KeywordType, *, obsolete: bool
) -> str | Err:
    """Consume ``keyword STR+``; the caller has checked the keyword is next."""
    token = stream.advance()
    if (error := _check_obsolete(token, obsolete)) is not None:
        return error
    return parse_strings(stream, str(keyword), token.line, obsolete=obsolete)


def parse_entry(stream: TokenStream, comments: Sequence[CommentToken]) -> Entry | Err:
    """Parse one translation starting at msgctxt or msgid.

    Args:
        stream: Token stream positioned after the entry's comments
        comments: Comment tokens that preceded the entry

    Returns:
        Translation or PluralTranslation, or Err for the first grammar violation
    """
    first = stream.peek()
    if not isinstance(first, KeywordToken) or first.keyword not in _ENTRY_START:
        return Err.from_diagnostic(
            ErrorTemplate.expected_msgid(stream.error_line(first), describe_token(first))
        )
    obsolete = first.obsolete

    msgctxt: str | None = None
    if first.keyword is KeywordType.MSGCTXT:
        context = _parse_statement(stream, KeywordType.MSGCTXT, obsolete=obsolete)
        if isinstance(context, Err):
            return context
        msgctxt = context

        token = stream.peek()
        if not _is_keyword(token, KeywordType.MSGID):
            return Err.from_diagnostic(
                ErrorTemplate.expected_msgid(stream.error_line(token), describe_token(token))
            )

    msgid = _parse_statement(stream, KeywordType.MSGID, obsolete=obsolete)
    if isinstance(msgid, Err):
        return msgid

    metadata = CommentBlock.from_tokens(comments)
    token = stream.peek()

    if _is_keyword(token, KeywordType.MSGID_PLURAL):
        msgid_plural = _parse_statement(stream, KeywordType.MSGID_PLURAL, obsolete=obsolete)
        if isinstance(msgid_plural, Err):
            return msgid_plural
        forms = parse_plural_forms(stream, obsolete=obsolete)
        if isinstance(forms, Err):
            return forms
        return PluralTranslation(
            msgid=msgid,
            msgid_plural=msgid_plural,
            msgstr=forms,
            msgctxt=msgctxt,
            comments=metadata.comments,
            extracted_comments=metadata.extracted_comments,
            references=metadata.references,
            flags=metadata.flags,
            previous_msgids=metadata.previous_msgids,
            obsolete=obsolete,
            line=first.line,
        )

    if _is_keyword(token, KeywordType.MSGSTR):
        if (error := _check_obsolete(token, obsolete)) is not None:
            return error
        stream.advance()
        index = stream.peek()
        if isinstance(index, PluralIndexToken):
            return Err.from_diagnostic(
                ErrorTemplate.plural_index_without_plural(index.index, index.line)
            )
        msgstr = parse_strings(stream, str(KeywordType.MSGSTR), token.line, obsolete=obsolete)
        if isinstance(msgstr, Err):
            return msgstr
        return Translation(
            msgid=msgid,
            msgstr=msgstr,
            msgctxt=msgctxt,
            comments=metadata.comments,
            extracted_comments=metadata.extracted_comments,
            references=metadata.references,
            flags=metadata.flags,
            previous_msgids=metadata.previous_msgids,
            obsolete=obsolete,
            line=first.line,
        )

    return Err.from_diagnostic(ErrorTemplate.expected_msgstr(stream.error_line(token)))

"""PO translation entry definitions.

A parsed catalog is a tuple of entries, each a ``Translation`` or a
``PluralTranslation``. Both are frozen dataclasses sharing the same comment
metadata; type guards are provided as static methods.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "Translation",
    "PluralTranslation",
    "Entry",
]

_FUZZY_FLAG = "fuzzy"


@dataclass(frozen=True, slots=True)
class Translation:
    """Singular translation.

    Attributes:
        msgid: Source string (possibly empty; empty msgid is the header)
        msgstr: Translated string (possibly empty)
        msgctxt: Disambiguating context, or None
        comments: Translator comments (``#``), in source order
        extracted_comments: Extracted comments (``#.``), in source order
        references: ``file:line`` references from ``#:`` lines
        flags: Flags from ``#,`` lines, e.g. ``{"fuzzy", "c-format"}``
        previous_msgids: Text of ``#|`` lines, in source order
        obsolete: True when written with ``#~``
        line: Line of the first statement (msgctxt or msgid)

    Example:
        Source:
            #, fuzzy
            msgid "Hello"
            msgstr "Hallo"
        Translation(msgid="Hello", msgstr="Hallo", flags=frozenset({"fuzzy"}), line=2)
    """

    msgid: str
    msgstr: str
    msgctxt: str | None = None
    comments: tuple[str, ...] = ()
    extracted_comments: tuple[str, ...] = ()
    references: tuple[str, ...] = ()
    flags: frozenset[str] = frozenset()
    previous_msgids: tuple[str, ...] = ()
    obsolete: bool = False
    line: int = field(default=1, compare=False)

    @property
    def is_fuzzy(self) -> bool:
        """True when the translation carries the ``fuzzy`` flag."""
        return _FUZZY_FLAG in self.flags

    @property
    def is_header(self) -> bool:
        """True for the catalog header entry (empty msgid, no context)."""
        return self.msgid == "" and self.msgctxt is None

    @staticmethod
    def guard(entry: object) -> TypeIs["Translation"]:
        """Type guard for Translation."""
        return isinstance(entry, Translation)


@dataclass(frozen=True, slots=True)
class PluralTranslation:
    """Translation with plural forms.

    Attributes:
        msgid: Singular source string
        msgid_plural: Plural source string
        msgstr: Read-only plural index -> translated string; keys are 0..n-1
        (remaining attributes as in Translation)

    Example:
        Source:
            msgid "one file"
            msgid_plural "%d files"
            msgstr[0] "ein Datei"
            msgstr[1] "%d Dateien"
        PluralTranslation(msgid="one file", msgid_plural="%d files",
                          msgstr={0: "ein Datei", 1: "%d Dateien"})
    """

    msgid: str
    msgid_plural: str
    msgstr: Mapping[int, str] = field(hash=False)
    msgctxt: str | None = None
    comments: tuple[str, ...] = ()
    extracted_comments: tuple[str, ...] = ()
    references: tuple[str, ...] = ()
    flags: frozenset[str] = frozenset()
    previous_msgids: tuple[str, ...] = ()
    obsolete: bool = False
    line: int = field(default=1, compare=False)

    def __post_init__(self) -> None:
        """Validate plural form invariants and freeze the forms."""
        if not self.msgstr:
            msg = "PluralTranslation requires at least one msgstr[N]"
            raise ValueError(msg)
        object.__setattr__(self, "msgstr", MappingProxyType(dict(self.msgstr)))

    @property
    def is_fuzzy(self) -> bool:
        """True when the translation carries the ``fuzzy`` flag."""
        return _FUZZY_FLAG in self.flags

    @property
    def is_header(self) -> bool:
        """Plural translations are never the header."""
        return False

    @property
    def plural_count(self) -> int:
        """Number of plural forms."""
        return len(self.msgstr)

    @staticmethod
    def guard(entry: object) -> TypeIs["PluralTranslation"]:
        """Type guard for PluralTranslation."""
        return isinstance(entry, PluralTranslation)


type Entry = Translation | PluralTranslation

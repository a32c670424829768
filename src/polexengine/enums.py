"""Enumerations for POLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class KeywordType(StrEnum):
    """PO statement keyword.

    StrEnum provides automatic string conversion: str(KeywordType.MSGID) == "msgid"
    """

    MSGID = "msgid"
    """Source string: msgid "Hello" """

    MSGID_PLURAL = "msgid_plural"
    """Plural source string: msgid_plural "Hellos" """

    MSGSTR = "msgstr"
    """Translated string: msgstr "Hallo" or msgstr[0] "Hallo" """

    MSGCTXT = "msgctxt"
    """Disambiguating context: msgctxt "menu" """


class CommentType(StrEnum):
    """Type of PO comment line, keyed by the character after '#'.

    StrEnum provides automatic string conversion: str(CommentType.FLAG) == "flag"
    """

    TRANSLATOR = "translator"
    """Translator comment: # Reviewed by Ann"""

    EXTRACTED = "extracted"
    """Extracted (developer) comment: #. Shown on the login page"""

    REFERENCE = "reference"
    """Source reference: #: lib/app.ex:12 lib/app.ex:40"""

    FLAG = "flag"
    """Flags: #, fuzzy, elixir-format"""

    PREVIOUS = "previous"
    """Previous untranslated string: #| msgid "Helo" """


__all__ = [
    "CommentType",
    "KeywordType",
]

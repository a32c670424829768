"""Catalog view over parsed entries.

The first translation of a PO file usually has an empty msgid; its msgstr
holds ``Key: value`` metadata lines (``Language``, ``Plural-Forms``,
``Content-Type``...). :class:`Catalog` separates that header from the
translations and exposes the common fields.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from polexengine.core.babel_compat import get_unknown_locale_error
from polexengine.locale_utils import get_babel_locale
from polexengine.syntax.ast import Entry, Translation

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["Catalog", "parse_headers"]

logger = logging.getLogger(__name__)


def parse_headers(msgstr: str) -> dict[str, str]:
    """Split header msgstr into a mapping.

    Each line is ``Key: value``; the first colon separates key from value.
    Lines without a colon are skipped and later duplicates win. Keys keep
    their case.

    Example:
        >>> parse_headers("Language: de\\nPlural-Forms: nplurals=2; plural=(n != 1);\\n")
        {'Language': 'de', 'Plural-Forms': 'nplurals=2; plural=(n != 1);'}
    """
    headers: dict[str, str] = {}
    for raw_line in msgstr.split("\n"):
        key, sep, value = raw_line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        headers[key] = value.strip()
    return headers


@dataclass(frozen=True, slots=True)
class Catalog:
    """Parsed catalog: header metadata plus translations.

    Attributes:
        entries: All entries in source order, header included
        headers: Read-only header metadata (empty when the catalog has no header)
    """

    entries: tuple[Entry, ...]
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Freeze the header mapping."""
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def from_entries(cls, entries: tuple[Entry, ...]) -> Catalog:
        """Build a catalog, reading metadata from the header entry if present."""
        header = _find_header(entries)
        headers = parse_headers(header.msgstr) if header is not None else {}
        return cls(entries=entries, headers=headers)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.translations)

    def __len__(self) -> int:
        return len(self.translations)

    @property
    def header(self) -> Translation | None:
        """Header entry (active, empty msgid, no context), or None."""
        return _find_header(self.entries)

    @property
    def translations(self) -> tuple[Entry, ...]:
        """Entries other than the header, in source order."""
        header = self.header
        return tuple(entry for entry in self.entries if entry is not header)

    @property
    def language(self) -> str | None:
        """Value of the ``Language`` header, or None when absent or empty."""
        return self.headers.get("Language") or None

    @property
    def plural_forms(self) -> str | None:
        """Raw ``Plural-Forms`` header, or None when absent or empty."""
        return self.headers.get("Plural-Forms") or None

    def babel_locale(self) -> Locale | None:
        """Resolve the Language header to a Babel Locale.

        Returns:
            babel.Locale, or None when there is no Language header or
            Babel does not know the locale (logged as a warning)

        Raises:
            BabelImportError: If Babel is not installed
        """
        if self.language is None:
            return None
        unknown_locale_error = get_unknown_locale_error()
        try:
            return get_babel_locale(self.language)
        except (unknown_locale_error, ValueError) as e:
            logger.warning("Unknown catalog language '%s': %s", self.language, e)
            return None


def _find_header(entries: tuple[Entry, ...]) -> Translation | None:
    for entry in entries:
        if isinstance(entry, Translation) and entry.is_header and not entry.obsolete:
            return entry
    return None

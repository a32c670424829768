"""Locale utilities for catalog Language headers.

PO headers carry POSIX-style codes (``pt_BR``, ``sr@latin``) while tooling
often hands around BCP-47 (``pt-BR``). This module normalizes both to the
form Babel parses.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from polexengine.core.babel_compat import get_locale_class

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a catalog locale code to POSIX format for Babel.

    Strips surrounding whitespace, any encoding suffix (``.UTF-8``) and
    converts BCP-47 hyphens to underscores. A ``@modifier`` is kept, since
    Babel understands ``sr_RS@latin``.

    Args:
        locale_code: Locale code as written in a header (e.g., "pt-BR", "de_DE.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "pt_BR", "de_DE")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("sr_RS@latin")
        'sr_RS@latin'
    """
    code = locale_code.strip()
    base, sep, modifier = code.partition("@")
    base = base.split(".")[0]
    return base.replace("-", "_") + sep + modifier


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("pt-BR")
        >>> locale.language
        'pt'
        >>> locale.territory
        'BR'
    """
    locale_class = get_locale_class()
    return locale_class.parse(normalize_locale(locale_code))

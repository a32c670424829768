"""Lazy access to Babel for locale lookups.

Tokenizing and parsing PO text never touches Babel. Only resolving a
catalog's ``Language`` header (``Catalog.babel_locale`` and
``locale_utils.get_babel_locale``) needs it, so Babel ships as the
``babel`` extra and is imported here on first use.

Callers fetch Babel classes through the getters below instead of importing
``babel`` at module level; a missing install then surfaces as one
``BabelImportError`` naming the call that needed it.

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelImportError",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]

_INSTALL_HINT = "pip install polexengine[babel]"


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """A locale lookup was attempted without the ``babel`` extra installed.

    Attributes:
        feature: The call that needed Babel, e.g. ``"Catalog.babel_locale"``
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} resolves catalog languages with Babel, which is not installed. "
            f"Install with: {_INSTALL_HINT}"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """True when ``import babel`` succeeds. Checked once per process."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError for ``feature`` unless Babel is importable."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class(feature: str = "get_babel_locale") -> type[Locale]:
    """Return ``babel.Locale``, importing Babel on first use.

    Args:
        feature: Caller named in the error when Babel is missing

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel(feature)
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error(
    feature: str = "Catalog.babel_locale",
) -> type[UnknownLocaleErrorType]:
    """Return ``babel.core.UnknownLocaleError`` for use in ``except`` clauses.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel(feature)
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError

"""POLexEngine - gettext PO catalog tokenizer and parser.

Reads ``.po``/``.pot`` sources into immutable translation entries. Errors
are values: every stage returns ``Ok(value)`` or ``Err(line, reason)``, and
the ``*_or_raise`` variants convert those into exceptions.

Public API:
    parse_string - Parse PO text to entries (Ok | Err)
    parse_string_or_raise - Parse PO text, raising PoSyntaxError
    parse_file - Parse a catalog file (Ok | Err | IOFailure)
    parse_file_or_raise - Parse a catalog file, raising PoSyntaxError/PoFileError
    load_catalog / load_catalog_file - Parse into a Catalog with header metadata
    Translation, PluralTranslation - Entry types

Exceptions:
    PoError - Base exception class
    PoSyntaxError - Lexical and structural errors
    PoFileError - Unreadable catalog files

Submodules:
    polexengine.syntax - Tokenizer, parser, tokens and entry types
    polexengine.diagnostics - Error codes, templates and formatting
    polexengine.catalog - Header metadata
    polexengine.loading - Catalog loaders
"""

from .catalog import Catalog
from .diagnostics import PoError, PoFileError, PoSyntaxError
from .po import (
    load_catalog,
    load_catalog_file,
    parse_file,
    parse_file_or_raise,
    parse_string,
    parse_string_or_raise,
)
from .syntax import Err, IOFailure, Ok, PluralTranslation, Translation

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("polexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__recommended_encoding__ = "UTF-8"

__all__ = [
    "Catalog",
    "Err",
    "IOFailure",
    "Ok",
    "PluralTranslation",
    "PoError",
    "PoFileError",
    "PoSyntaxError",
    "Translation",
    "__recommended_encoding__",
    "__version__",
    "load_catalog",
    "load_catalog_file",
    "parse_file",
    "parse_file_or_raise",
    "parse_string",
    "parse_string_or_raise",
]

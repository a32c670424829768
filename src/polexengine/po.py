"""Convenience entry points over the tokenizer and parser.

Four functions mirror each other:

    parse_string(text)           -> Ok(entries) | Err(line, reason)
    parse_string_or_raise(text)  -> entries, or raises PoSyntaxError
    parse_file(path)             -> Ok(entries) | Err(line, reason) | IOFailure(reason)
    parse_file_or_raise(path)    -> entries, or raises PoSyntaxError / PoFileError

plus ``load_catalog`` / ``load_catalog_file``, which wrap the raising
variants in a :class:`~polexengine.catalog.Catalog`.

Security:
    Inputs larger than ``max_source_size`` (default
    :data:`~polexengine.constants.MAX_SOURCE_SIZE`) are rejected with
    ValueError before tokenizing.

Python 3.13+.
"""

import errno
import logging

from polexengine.catalog import Catalog
from polexengine.constants import MAX_SOURCE_SIZE
from polexengine.diagnostics import ErrorTemplate, PoFileError, PoSyntaxError
from polexengine.loading import CatalogLoader, CatalogPath, PathCatalogLoader
from polexengine.syntax import Entry, Err, IOFailure, Ok, Result, parse, tokenize

__all__ = [
    "load_catalog",
    "load_catalog_file",
    "parse_file",
    "parse_file_or_raise",
    "parse_string",
    "parse_string_or_raise",
]

logger = logging.getLogger(__name__)


def _check_size(text: str, max_source_size: int | None) -> None:
    limit = MAX_SOURCE_SIZE if max_source_size is None else max_source_size
    if limit > 0 and len(text) > limit:
        msg = (
            f"Source size ({len(text):,} characters) exceeds maximum "
            f"({limit:,} characters). Pass max_source_size to increase the limit."
        )
        raise ValueError(msg)


def parse_string(text: str, *, max_source_size: int | None = None) -> Result[tuple[Entry, ...]]:
    """Parse PO text into translation entries.

    Args:
        text: Catalog source
        max_source_size: Size limit in characters (None = default 10 MB, 0 = unlimited)

    Returns:
        Ok(entries), or Err(line, reason) from whichever stage failed first

    Raises:
        ValueError: If text exceeds max_source_size

    Example:
        >>> parse_string('msgid "foo"\\nmsgstr "bar"\\n')
        Ok(value=(Translation(msgid='foo', msgstr='bar', ...),))
        >>> parse_string("foo")
        Err(line=1, reason="unknown keyword 'foo'")
    """
    _check_size(text, max_source_size)

    match tokenize(text):
        case Ok(tokens):
            result = parse(tokens)
        case Err() as error:
            result = error

    match result:
        case Ok(entries):
            logger.debug("Parsed %d entries", len(entries))
        case Err(line, reason):
            logger.debug("Syntax error at line %d: %s", line, reason)
    return result


def parse_string_or_raise(
    text: str, *, max_source_size: int | None = None
) -> tuple[Entry, ...]:
    """Parse PO text, raising on syntax errors.

    Raises:
        PoSyntaxError: On the first lexical or structural error;
            ``str(error)`` is ``"<line>: <reason>"``
        ValueError: If text exceeds max_source_size

    Example:
        >>> parse_string_or_raise("msgid")
        Traceback (most recent call last):
        ...
        polexengine.diagnostics.errors.PoSyntaxError: 1: no space after 'msgid'
    """
    match parse_string(text, max_source_size=max_source_size):
        case Ok(entries):
            return entries
        case Err(line, reason) as error:
            raise PoSyntaxError(line=line, reason=reason, diagnostic=error.diagnostic)


def _errno_name(error: OSError) -> str:
    """Lowercase errno name for an OSError, e.g. ``"enoent"``."""
    if error.errno is not None and error.errno in errno.errorcode:
        return errno.errorcode[error.errno].lower()
    return "unknown"


def parse_file(
    path: CatalogPath,
    *,
    loader: CatalogLoader | None = None,
    max_source_size: int | None = None,
) -> Result[tuple[Entry, ...]] | IOFailure:
    """Parse a catalog file into translation entries.

    Args:
        path: Catalog path
        loader: Source of catalog text (default: PathCatalogLoader())
        max_source_size: Size limit in characters (see parse_string)

    Returns:
        - Ok(entries)
        - Err(line, reason) if the contents are malformed
        - IOFailure(reason) if the file cannot be read, where reason is the
          lowercase errno name (e.g. "enoent")

    Raises:
        ValueError: If the file exceeds max_source_size

    Example:
        >>> parse_file("nonexistent.po")
        IOFailure(reason='enoent', path='nonexistent.po')
    """
    loader = loader if loader is not None else PathCatalogLoader()
    described = loader.describe_path(path)
    try:
        text = loader.load(path)
    except OSError as e:
        reason = _errno_name(e)
        logger.warning("Failed to read catalog %s: %s", described, e.strerror or e)
        return IOFailure(reason, path=described, error=e)

    return parse_string(text, max_source_size=max_source_size)


def parse_file_or_raise(
    path: CatalogPath,
    *,
    loader: CatalogLoader | None = None,
    max_source_size: int | None = None,
) -> tuple[Entry, ...]:
    """Parse a catalog file, raising on any error.

    Raises:
        PoFileError: If the file cannot be read (chained from the OSError);
            message is ``"could not parse file <path>: <strerror>"``
        PoSyntaxError: On syntax errors, with ``file`` set; message is
            ``"<path>:<line>: <reason>"``
        ValueError: If the file exceeds max_source_size
    """
    loader = loader if loader is not None else PathCatalogLoader()
    described = loader.describe_path(path)

    match parse_file(path, loader=loader, max_source_size=max_source_size):
        case Ok(entries):
            return entries
        case IOFailure(reason) as failure:
            cause = failure.error
            strerror = (cause.strerror if cause is not None else None) or reason
            diagnostic = ErrorTemplate.file_read_failed(described, strerror.lower())
            raise PoFileError(diagnostic, path=described, reason=reason) from cause
        case Err(line, reason) as error:
            diagnostic = error.diagnostic.with_file(described) if error.diagnostic else None
            raise PoSyntaxError(line=line, reason=reason, file=described, diagnostic=diagnostic)


def load_catalog(text: str, *, max_source_size: int | None = None) -> Catalog:
    """Parse PO text into a Catalog, raising like parse_string_or_raise()."""
    return Catalog.from_entries(parse_string_or_raise(text, max_source_size=max_source_size))


def load_catalog_file(
    path: CatalogPath,
    *,
    loader: CatalogLoader | None = None,
    max_source_size: int | None = None,
) -> Catalog:
    """Parse a catalog file into a Catalog, raising like parse_file_or_raise()."""
    entries = parse_file_or_raise(path, loader=loader, max_source_size=max_source_size)
    return Catalog.from_entries(entries)


"""Tests for the parse_* / load_catalog* entry points."""

from __future__ import annotations

import errno
import logging
from pathlib import Path

import pytest

import polexengine
from polexengine import (
    Catalog,
    Err,
    IOFailure,
    Ok,
    PluralTranslation,
    PoFileError,
    PoSyntaxError,
    Translation,
    load_catalog,
    load_catalog_file,
    parse_file,
    parse_file_or_raise,
    parse_string,
    parse_string_or_raise,
)
from polexengine.diagnostics import DiagnosticCode
from polexengine.loading import PathCatalogLoader


class MemoryLoader:
    """In-memory CatalogLoader used to exercise the loader protocol."""

    def __init__(self, files: dict[str, str]) -> None:
        self.files = files

    def load(self, path: str) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path) from None

    def describe_path(self, path: str) -> str:
        return f"memory:{path}"


# ============================================================================
# STRING INPUT
# ============================================================================


class TestParseString:
    """parse_string chains tokenize and parse."""

    def test_ok(self) -> None:
        """Valid text yields Ok(entries)."""
        assert parse_string('msgid "foo"\nmsgstr "bar"\n') == Ok(
            (Translation(msgid="foo", msgstr="bar"),)
        )

    def test_lexical_error(self) -> None:
        """Tokenizer errors short-circuit."""
        assert parse_string("foo") == Err(1, "unknown keyword 'foo'")

    def test_structural_error(self) -> None:
        """Parser errors come back in the same shape."""
        assert parse_string('msgid "a"\n') == Err(1, "expected msgstr")

    def test_size_limit(self) -> None:
        """Oversized input is rejected before scanning."""
        with pytest.raises(ValueError, match="exceeds maximum"):
            parse_string('msgid "a"\nmsgstr "b"\n', max_source_size=5)

    def test_size_limit_zero_is_unlimited(self) -> None:
        """max_source_size=0 disables the check."""
        assert isinstance(parse_string('msgid "a"\nmsgstr ""\n', max_source_size=0), Ok)

    def test_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        """Outcomes are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="polexengine"):
            parse_string('msgid "a"\nmsgstr ""\n')
            parse_string("bogus")
        messages = [record.getMessage() for record in caplog.records]
        assert "Parsed 1 entries" in messages
        assert "Syntax error at line 1: unknown keyword 'bogus'" in messages


class TestParseStringOrRaise:
    """Raising variant for strings."""

    def test_returns_entries(self) -> None:
        """Entries are returned directly."""
        (entry,) = parse_string_or_raise(
            'msgid "a"\nmsgid_plural "b"\nmsgstr[0] "x"\nmsgstr[1] "y"\n'
        )
        assert isinstance(entry, PluralTranslation)

    def test_raises_syntax_error(self) -> None:
        """Errors become PoSyntaxError carrying line and reason."""
        with pytest.raises(PoSyntaxError) as exc_info:
            parse_string_or_raise("msgid")
        error = exc_info.value
        assert str(error) == "1: no space after 'msgid'"
        assert (error.line, error.reason, error.file) == (1, "no space after 'msgid'", None)
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.MISSING_SPACE_AFTER_KEYWORD


# ============================================================================
# FILE INPUT
# ============================================================================


class TestParseFile:
    """parse_file adds the I/O outcome."""

    def test_ok(self, catalog_file: Path) -> None:
        """A readable valid file parses like its text."""
        result = parse_file(catalog_file)
        assert isinstance(result, Ok)
        assert result == parse_string(catalog_file.read_text(encoding="utf-8"))

    def test_accepts_str_path(self, catalog_file: Path) -> None:
        """Plain strings work as paths."""
        assert isinstance(parse_file(str(catalog_file)), Ok)

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is IOFailure("enoent")."""
        result = parse_file(tmp_path / "missing.po")
        assert result == IOFailure("enoent")
        assert tuple(result) == ("enoent",)

    def test_directory(self, tmp_path: Path) -> None:
        """Reading a directory reports its errno."""
        assert parse_file(tmp_path) == IOFailure("eisdir")

    def test_undecodable_file(self, tmp_path: Path) -> None:
        """Invalid UTF-8 is reported as an illegal byte sequence."""
        path = tmp_path / "latin1.po"
        path.write_bytes(b'msgid "caf\xe9"\nmsgstr ""\n')
        assert parse_file(path) == IOFailure("eilseq")

    def test_custom_encoding(self, tmp_path: Path) -> None:
        """The loader's encoding decides how bytes are read."""
        path = tmp_path / "latin1.po"
        path.write_bytes(b'msgid "caf\xe9"\nmsgstr ""\n')
        result = parse_file(path, loader=PathCatalogLoader(encoding="latin-1"))
        assert result == Ok((Translation(msgid="café", msgstr=""),))

    def test_syntax_error(self, tmp_path: Path) -> None:
        """Malformed contents are an Err, not an IOFailure."""
        path = tmp_path / "bad.po"
        path.write_text('msgid "a"\nmsgstr "b\n', encoding="utf-8")
        assert parse_file(path) == Err(2, "unterminated string")

    def test_failure_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Read failures are logged as warnings."""
        with caplog.at_level(logging.WARNING, logger="polexengine"):
            parse_file(tmp_path / "missing.po")
        assert any(
            record.levelno == logging.WARNING and "missing.po" in record.getMessage()
            for record in caplog.records
        )

    def test_custom_loader(self) -> None:
        """Any object with load/describe_path can supply the text."""
        loader = MemoryLoader({"de.po": 'msgid "a"\nmsgstr "b"\n'})
        assert parse_file("de.po", loader=loader) == Ok((Translation(msgid="a", msgstr="b"),))
        assert parse_file("fr.po", loader=loader) == IOFailure("enoent")


class TestParseFileOrRaise:
    """Raising variant for files."""

    def test_returns_entries(self, catalog_file: Path) -> None:
        """Entries are returned directly."""
        assert len(parse_file_or_raise(catalog_file)) == 5

    def test_missing_file(self, tmp_path: Path) -> None:
        """Unreadable files raise PoFileError chained from the OSError."""
        path = tmp_path / "missing.po"
        with pytest.raises(PoFileError) as exc_info:
            parse_file_or_raise(path)
        error = exc_info.value
        assert str(error) == f"could not parse file {path}: no such file or directory"
        assert error.reason == "enoent"
        assert error.path == str(path)
        assert isinstance(error.__cause__, FileNotFoundError)

    def test_syntax_error_names_file(self, tmp_path: Path) -> None:
        """Syntax errors are prefixed with the file path."""
        path = tmp_path / "bad.po"
        path.write_text('msgid "a"\nmsgid "b"\n', encoding="utf-8")
        with pytest.raises(PoSyntaxError) as exc_info:
            parse_file_or_raise(path)
        error = exc_info.value
        assert str(error) == f"{path}:2: expected msgstr"
        assert error.file == str(path)
        assert error.diagnostic is not None
        assert error.diagnostic.file == str(path)

    def test_custom_loader_path_description(self) -> None:
        """Messages use the loader's description of the path."""
        loader = MemoryLoader({"de.po": "bogus"})
        with pytest.raises(PoSyntaxError, match=r"^memory:de\.po:1: unknown keyword 'bogus'$"):
            parse_file_or_raise("de.po", loader=loader)
        with pytest.raises(PoFileError, match=r"^could not parse file memory:fr\.po: "):
            parse_file_or_raise("fr.po", loader=loader)


# ============================================================================
# CATALOG LOADING
# ============================================================================


class TestLoadCatalog:
    """load_catalog wraps entries with header metadata."""

    def test_from_string(self, sample_catalog: str) -> None:
        """Header fields are available on the catalog."""
        catalog = load_catalog(sample_catalog)
        assert isinstance(catalog, Catalog)
        assert catalog.language == "de"
        assert len(catalog) == 4

    def test_from_file(self, catalog_file: Path) -> None:
        """Files load the same way."""
        assert load_catalog_file(catalog_file).plural_forms == "nplurals=2; plural=(n != 1);"

    def test_errors_raise(self) -> None:
        """Syntax errors raise like parse_string_or_raise."""
        with pytest.raises(PoSyntaxError):
            load_catalog("bogus")


class TestPackageExports:
    """Top-level package surface."""

    def test_version(self) -> None:
        """A version string is always available."""
        assert isinstance(polexengine.__version__, str)
        assert polexengine.__version__

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ exists."""
        for name in polexengine.__all__:
            assert hasattr(polexengine, name), name

"""Tests for Catalog and header metadata parsing."""

from __future__ import annotations

import logging

import pytest

from polexengine import load_catalog
from polexengine.catalog import Catalog, parse_headers
from polexengine.syntax import PluralTranslation, Translation


class TestParseHeaders:
    """Key: value lines from the header msgstr."""

    def test_standard_header(self) -> None:
        """Each line becomes one key."""
        headers = parse_headers(
            "Project-Id-Version: demo 1.0\n"
            "Language: pt_BR\n"
            "Plural-Forms: nplurals=2; plural=(n > 1);\n"
        )
        assert headers == {
            "Project-Id-Version": "demo 1.0",
            "Language": "pt_BR",
            "Plural-Forms": "nplurals=2; plural=(n > 1);",
        }

    def test_first_colon_splits(self) -> None:
        """Values may contain colons."""
        assert parse_headers("Report-Msgid-Bugs-To: https://example.com/bugs\n") == {
            "Report-Msgid-Bugs-To": "https://example.com/bugs"
        }

    def test_lines_without_colon_skipped(self) -> None:
        """Free text and blank lines are ignored."""
        assert parse_headers("just text\n\nLanguage: de\n") == {"Language": "de"}

    def test_empty_key_skipped(self) -> None:
        """A line starting with a colon has no key."""
        assert parse_headers(": orphan\n") == {}

    def test_later_duplicate_wins(self) -> None:
        """Repeated keys keep the last value."""
        assert parse_headers("Language: de\nLanguage: fr\n") == {"Language": "fr"}

    def test_empty_value(self) -> None:
        """Keys with empty values are kept."""
        assert parse_headers("Language: \n") == {"Language": ""}


class TestCatalog:
    """Header detection and convenience properties."""

    def test_sample(self, sample_catalog: str) -> None:
        """Header is split off; translations keep source order."""
        catalog = load_catalog(sample_catalog)
        assert catalog.header is not None
        assert catalog.header.comments == ("German translations for the demo application.",)
        assert [entry.msgid for entry in catalog] == ["Hello", "Open %(name)s", "one file", "Goodbye"]
        assert catalog.headers["Content-Type"] == "text/plain; charset=UTF-8"
        assert catalog.language == "de"
        assert catalog.plural_forms == "nplurals=2; plural=(n != 1);"

    def test_without_header(self) -> None:
        """Catalogs need not have a header."""
        catalog = Catalog.from_entries((Translation(msgid="a", msgstr="b"),))
        assert catalog.header is None
        assert catalog.headers == {}
        assert catalog.language is None
        assert catalog.plural_forms is None
        assert len(catalog) == 1

    def test_header_with_context_is_not_header(self) -> None:
        """An empty msgid under a context is a normal translation."""
        entry = Translation(msgid="", msgstr="Language: de\n", msgctxt="ctx")
        catalog = Catalog.from_entries((entry,))
        assert catalog.header is None
        assert list(catalog) == [entry]

    def test_obsolete_header_ignored(self) -> None:
        """An obsolete empty msgid does not provide metadata."""
        entry = Translation(msgid="", msgstr="Language: de\n", obsolete=True)
        catalog = Catalog.from_entries((entry,))
        assert catalog.header is None
        assert catalog.language is None

    def test_empty_language_is_none(self) -> None:
        """An empty Language value counts as absent."""
        catalog = load_catalog('msgid ""\nmsgstr "Language: \\n"\n')
        assert catalog.language is None

    def test_entries_keep_header(self) -> None:
        """entries is the full parse result."""
        header = Translation(msgid="", msgstr="Language: de\n")
        plural = PluralTranslation(msgid="a", msgid_plural="b", msgstr={0: ""})
        catalog = Catalog.from_entries((header, plural))
        assert catalog.entries == (header, plural)
        assert catalog.translations == (plural,)

    def test_headers_read_only_and_hashable(self, sample_catalog: str) -> None:
        """Header metadata is frozen along with the catalog."""
        catalog = load_catalog(sample_catalog)
        with pytest.raises(TypeError):
            catalog.headers["Language"] = "fr"  # type: ignore[index]
        assert hash(catalog) == hash(load_catalog(sample_catalog))


class TestCatalogBabelLocale:
    """Language header resolved through Babel."""

    def test_known_locale(self) -> None:
        """A valid Language resolves to a Locale."""
        pytest.importorskip("babel")
        locale = load_catalog('msgid ""\nmsgstr "Language: pt-BR\\n"\n').babel_locale()
        assert locale is not None
        assert (locale.language, locale.territory) == ("pt", "BR")

    def test_no_language(self) -> None:
        """Without a Language header there is nothing to resolve."""
        assert Catalog.from_entries(()).babel_locale() is None

    def test_unknown_locale_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown languages yield None and a warning."""
        pytest.importorskip("babel")
        catalog = load_catalog('msgid ""\nmsgstr "Language: xx_QQ\\n"\n')
        with caplog.at_level(logging.WARNING, logger="polexengine"):
            assert catalog.babel_locale() is None
        assert any("xx_QQ" in record.getMessage() for record in caplog.records)

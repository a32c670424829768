"""Quickstart example for polexengine.

Shows the four parse entry points and how to tell their outcomes apart
with pattern matching.

PARSER-ONLY: This example works WITHOUT Babel.

Python 3.13+.
"""

import tempfile
from pathlib import Path

from polexengine import (
    Err,
    IOFailure,
    Ok,
    PluralTranslation,
    PoFileError,
    PoSyntaxError,
    Translation,
    load_catalog,
    parse_file,
    parse_file_or_raise,
    parse_string,
    parse_string_or_raise,
)

CATALOG = """\
msgid ""
msgstr ""
"Language: de\\n"
"Plural-Forms: nplurals=2; plural=(n != 1);\\n"

#: app.py:3
msgid "Hello"
msgstr "Hallo"

#, fuzzy
msgid "one file"
msgid_plural "%d files"
msgstr[0] "eine Datei"
msgstr[1] "%d Dateien"

#~ msgid "Goodbye"
#~ msgstr "Tschüss"
"""

# Example 1: Parse a string
print("=" * 50)
print("Example 1: parse_string")
print("=" * 50)

match parse_string(CATALOG):
    case Ok(entries):
        for entry in entries:
            match entry:
                case Translation(msgid="", obsolete=False):
                    print("header")
                case Translation(msgid=msgid, msgstr=msgstr, obsolete=True):
                    print(f"obsolete: {msgid!r} -> {msgstr!r}")
                case Translation(msgid=msgid, msgstr=msgstr):
                    print(f"{msgid!r} -> {msgstr!r}")
                case PluralTranslation(msgid=msgid, msgstr=forms):
                    print(f"{msgid!r} -> {forms} (fuzzy={entry.is_fuzzy})")
    case Err(line, reason):
        print(f"{line}: {reason}")

# Example 2: Errors are values
print("\n" + "=" * 50)
print("Example 2: syntax errors")
print("=" * 50)

print(parse_string('msgid "a"\nmsgstr[1] "b"\n'))
# Output: Err(line=2, reason='msgstr[1] requires msgid_plural')

try:
    parse_string_or_raise('msgid "unterminated\n')
except PoSyntaxError as e:
    print(e)
    # Output: 1: unterminated string
    if e.diagnostic is not None:
        print(e.diagnostic.format_error())

# Example 3: Files
print("\n" + "=" * 50)
print("Example 3: parse_file")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    path = Path(tmp) / "de.po"
    path.write_text(CATALOG, encoding="utf-8")

    match parse_file(path):
        case Ok(entries):
            print(f"{len(entries)} entries")
        case Err(line, reason):
            print(f"{path}:{line}: {reason}")
        case IOFailure(reason):
            print(f"cannot read {path}: {reason}")

    print(parse_file(Path(tmp) / "missing.po"))
    # Output: IOFailure(reason='enoent', path='...')

    try:
        parse_file_or_raise(Path(tmp) / "missing.po")
    except PoFileError as e:
        print(e)

# Example 4: Catalog metadata
print("\n" + "=" * 50)
print("Example 4: load_catalog")
print("=" * 50)

catalog = load_catalog(CATALOG)
print(f"language={catalog.language} plural_forms={catalog.plural_forms!r}")
print(f"{len(catalog)} translations")

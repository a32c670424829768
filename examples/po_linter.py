"""PO Linter Example - Building tooling on the parsed entries.

PARSER-ONLY: This example works WITHOUT Babel.

Detects common catalog issues:

- Duplicate msgid (within the same msgctxt)
- Untranslated entries
- Fuzzy entries
- Plural form count disagreeing with the Plural-Forms header

Load failures are printed through DiagnosticFormatter with their hint.

Usage:
    python examples/po_linter.py path/to/messages.po

Python 3.13+.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

from polexengine import Catalog, PluralTranslation, PoError, Translation, load_catalog_file
from polexengine.diagnostics import DiagnosticFormatter, OutputFormat

_NPLURALS = re.compile(r"nplurals\s*=\s*(\d+)")


@dataclass(frozen=True, slots=True)
class LintIssue:
    """Immutable lint issue result."""

    severity: str  # "error", "warning", "info"
    rule: str  # Rule ID
    message: str  # Human-readable message
    line: int


def lint_catalog(catalog: Catalog) -> list[LintIssue]:
    """Run every rule over the active translations of a catalog."""
    issues: list[LintIssue] = []
    seen: dict[tuple[str | None, str], int] = {}

    nplurals: int | None = None
    if catalog.plural_forms is not None and (match := _NPLURALS.search(catalog.plural_forms)):
        nplurals = int(match.group(1))

    for entry in catalog:
        if entry.obsolete:
            continue

        key = (entry.msgctxt, entry.msgid)
        if key in seen:
            issues.append(
                LintIssue("error", "duplicate", f"msgid {entry.msgid!r} first defined at line {seen[key]}", entry.line)
            )
        seen.setdefault(key, entry.line)

        if entry.is_fuzzy:
            issues.append(LintIssue("info", "fuzzy", f"fuzzy translation of {entry.msgid!r}", entry.line))

        match entry:
            case Translation(msgstr=""):
                issues.append(LintIssue("warning", "untranslated", f"{entry.msgid!r} is untranslated", entry.line))
            case PluralTranslation(msgstr=forms):
                if not all(forms.values()):
                    issues.append(
                        LintIssue("warning", "untranslated", f"{entry.msgid!r} has empty plural forms", entry.line)
                    )
                if nplurals is not None and len(forms) != nplurals:
                    issues.append(
                        LintIssue(
                            "error",
                            "plural-count",
                            f"{len(forms)} plural forms, header declares {nplurals}",
                            entry.line,
                        )
                    )

    return issues


def format_failure(error: PoError, *, color: bool = False) -> str:
    """Render a load failure in compiler style, with its hint when there is one."""
    if error.diagnostic is None:
        return str(error)
    formatter = DiagnosticFormatter(output_format=OutputFormat.RUST, color=color)
    return formatter.format(error.diagnostic)


def main(argv: list[str]) -> int:
    """Lint the catalog named on the command line."""
    if len(argv) != 2:
        print(f"usage: {argv[0]} CATALOG.po", file=sys.stderr)
        return 2

    try:
        catalog = load_catalog_file(argv[1])
    except PoError as e:
        print(format_failure(e, color=sys.stderr.isatty()), file=sys.stderr)
        return 1

    issues = lint_catalog(catalog)
    for issue in issues:
        print(f"{argv[1]}:{issue.line}: {issue.severity}[{issue.rule}]: {issue.message}")
    print(f"{len(issues)} issue(s) in {len(catalog)} translation(s)")
    return 1 if any(issue.severity == "error" for issue in issues) else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

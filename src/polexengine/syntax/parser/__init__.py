"""PO parser module.

Module Organization:
- core.py: parse() entry loop
- rules.py: Grammar rules (comments, string runs, plural forms, entries)

Public API:
    parse: Token sequence -> Ok(entries) | Err(line, reason)
    TokenStream: Token reader used by the rules (advanced usage)
"""

from polexengine.syntax.parser.core import parse
from polexengine.syntax.parser.rules import TokenStream

__all__ = ["TokenStream", "parse"]

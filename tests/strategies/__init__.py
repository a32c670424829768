"""Hypothesis strategies for POLexEngine property-based testing.

Usage:
    from tests.strategies import po_catalog, po_translation
    from tests.strategies.po import quote, obsolete

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - po_statement, po_comment_block, po_translation, po_plural_translation
    - po_catalog, po_chaos_source
"""

from .po import (
    comment_text,
    escape,
    obsolete,
    po_catalog,
    po_chaos_source,
    po_comment_block,
    po_plural_translation,
    po_statement,
    po_text,
    po_translation,
    quote,
)

__all__ = [
    "comment_text",
    "escape",
    "obsolete",
    "po_catalog",
    "po_chaos_source",
    "po_comment_block",
    "po_plural_translation",
    "po_statement",
    "po_text",
    "po_translation",
    "quote",
]

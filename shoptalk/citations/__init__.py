"""Citation parsing and rendering for contract answers."""

from .parser import (
    build_citation_marker,
    extract_citations,
    format_citation,
    has_citations,
    parse_citations,
    parse_footnote_citations,
    strip_citations,
    transform_to_markdown_footnotes,
)

__all__ = [
    "build_citation_marker",
    "extract_citations",
    "format_citation",
    "has_citations",
    "parse_citations",
    "parse_footnote_citations",
    "strip_citations",
    "transform_to_markdown_footnotes",
]

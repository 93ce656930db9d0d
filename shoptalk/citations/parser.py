"""Parse and render contract citations embedded in generated answers.

Marker format, emitted by the answering model as instructed by its prompt:

    [Doc: <document_id>, Art: <article>, Sec: <section>, Page: <page>]

`Art`, `Sec` and `Page` are optional but keep that order. Examples:

    [Doc: master, Art: 6, Sec: 2, Page: 45]
    [Doc: western, Art: 3, Page: 12]
    [Doc: northern-california, Page: 8]
"""

from __future__ import annotations

import re
from typing import Dict, List, Literal, Optional, Tuple, Union

from shoptalk.models.citation import (
    Citation,
    CitationSegment,
    FootnoteParseResult,
    FootnoteSegment,
    MarkdownFootnotes,
    ParseResult,
    TextSegment,
    UniqueSource,
)

CITATION_PATTERN = re.compile(
    r"\[Doc:\s*([a-zA-Z0-9-]+)"
    r"(?:,\s*Art:\s*([a-zA-Z0-9.]+))?"
    r"(?:,\s*Sec:\s*([a-zA-Z0-9.]+))?"
    r"(?:,\s*Page:\s*([0-9]+))?\]"
)
REPEATED_WHITESPACE = re.compile(r"\s{2,}")
MARKER_FIELD_INVALID = re.compile(r"[^a-zA-Z0-9.]")

CitationStyle = Literal["short", "full"]
SourceKey = Tuple[str, Optional[str], Optional[str], Optional[int]]


def _citation_from_match(match: re.Match[str]) -> Citation:
    document_id, article, section, page = match.groups()
    return Citation(
        document_id=document_id,
        article=article or None,
        section=section or None,
        page=int(page) if page else None,
        raw=match.group(0),
    )


def extract_citations(text: str) -> List[Citation]:
    return [_citation_from_match(match) for match in CITATION_PATTERN.finditer(text)]


def parse_citations(text: str) -> ParseResult:
    """Split text into prose and citation segments.

    Concatenating text contents and citation `raw` strings in order gives
    back the original text exactly.
    """
    citations: List[Citation] = []
    segments: List[Union[TextSegment, CitationSegment]] = []
    last_index = 0

    for match in CITATION_PATTERN.finditer(text):
        if match.start() > last_index:
            segments.append(TextSegment(content=text[last_index:match.start()]))
        citation = _citation_from_match(match)
        citations.append(citation)
        segments.append(CitationSegment(citation=citation))
        last_index = match.end()

    if last_index < len(text):
        segments.append(TextSegment(content=text[last_index:]))

    return ParseResult(original=text, citations=citations, segments=segments)


def document_display_name(document_id: str) -> str:
    """`northern-california` -> `Northern California`."""
    return " ".join(word[:1].upper() + word[1:] for word in document_id.split("-"))


def format_citation(citation: Citation, style: CitationStyle = "short") -> str:
    """Display string for a citation.

    short: document name plus `Art. N`, or `p.N` when there is no article.
    full: document name, then Article, Section and Page when present.
    """
    name = document_display_name(citation.document_id)

    if style == "short":
        if citation.article:
            return f"{name} Art. {citation.article}"
        if citation.page:
            return f"{name} p.{citation.page}"
        return name

    parts = [name]
    if citation.article:
        parts.append(f"Article {citation.article}")
    if citation.section:
        parts.append(f"Section {citation.section}")
    if citation.page:
        parts.append(f"Page {citation.page}")
    return ", ".join(parts)


def strip_citations(text: str) -> str:
    """Remove citation markers and tidy the whitespace they leave behind."""
    stripped = text
    # Removing a marker can splice the surrounding text into a new one.
    while CITATION_PATTERN.search(stripped):
        stripped = CITATION_PATTERN.sub("", stripped)
    return REPEATED_WHITESPACE.sub(" ", stripped).strip()


def has_citations(text: str) -> bool:
    return CITATION_PATTERN.search(text) is not None


def source_key(citation: Citation) -> SourceKey:
    return (citation.document_id, citation.article, citation.section, citation.page)


def parse_footnote_citations(text: str) -> FootnoteParseResult:
    """Parse text into footnote segments with deduplicated, numbered sources.

    Citations that agree on document, article, section and page share a
    footnote number; numbers follow first appearance.
    """
    segments: List[Union[TextSegment, FootnoteSegment]] = []
    sources: Dict[SourceKey, UniqueSource] = {}
    last_index = 0

    for match in CITATION_PATTERN.finditer(text):
        if match.start() > last_index:
            segments.append(TextSegment(content=text[last_index:match.start()]))

        citation = _citation_from_match(match)
        key = source_key(citation)
        source = sources.get(key)
        if source is None:
            source = UniqueSource(footnote_number=len(sources) + 1, citation=citation)
            sources[key] = source
        else:
            source.occurrences += 1

        segments.append(FootnoteSegment(footnote_number=source.footnote_number, citation=citation))
        last_index = match.end()

    if last_index < len(text):
        segments.append(TextSegment(content=text[last_index:]))

    return FootnoteParseResult(original=text, sources=list(sources.values()), segments=segments)


def transform_to_markdown_footnotes(text: str) -> MarkdownFootnotes:
    """Replace markers with `[^n]` references and append footnote definitions."""
    parsed = parse_footnote_citations(text)
    if not parsed.sources:
        return MarkdownFootnotes(markdown=text, citation_map={})

    body = "".join(
        segment.content if isinstance(segment, TextSegment) else f"[^{segment.footnote_number}]"
        for segment in parsed.segments
    )
    definitions = "\n".join(
        f"[^{source.footnote_number}]: {format_citation(source.citation, 'full')}"
        for source in parsed.sources
    )
    return MarkdownFootnotes(
        markdown=f"{body.rstrip()}\n\n{definitions}",
        citation_map={source.footnote_number: source.citation for source in parsed.sources},
    )


def _marker_field(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    cleaned = MARKER_FIELD_INVALID.sub("", value)
    return cleaned or None


def build_citation_marker(
    document_id: str,
    article: Optional[str] = None,
    section: Optional[str] = None,
    page: Optional[int] = None,
) -> str:
    """Marker for a chunk location, e.g. `[Doc: master, Art: 12, Page: 67]`.

    Characters the parser cannot read back, such as the parentheses in
    `3(a)`, are dropped.
    """
    parts = [f"Doc: {document_id}"]
    article = _marker_field(article)
    section = _marker_field(section)
    if article:
        parts.append(f"Art: {article}")
    if section:
        parts.append(f"Sec: {section}")
    if page:
        parts.append(f"Page: {page}")
    return "[" + ", ".join(parts) + "]"

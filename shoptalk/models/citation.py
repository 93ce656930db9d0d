"""Citation models parsed from generated answers."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel


class Citation(BaseModel):
    """Reference to a location in a contract document."""

    document_id: str
    article: Optional[str] = None
    section: Optional[str] = None
    page: Optional[int] = None
    raw: str


class TextSegment(BaseModel):
    type: Literal["text"] = "text"
    content: str


class CitationSegment(BaseModel):
    type: Literal["citation"] = "citation"
    citation: Citation


Segment = Union[TextSegment, CitationSegment]


class ParseResult(BaseModel):
    """Answer text split into alternating prose and citation segments."""

    original: str
    citations: List[Citation]
    segments: List[Segment]


class UniqueSource(BaseModel):
    """A distinct source with its footnote number."""

    footnote_number: int
    citation: Citation
    occurrences: int = 1


class FootnoteSegment(BaseModel):
    type: Literal["footnote"] = "footnote"
    footnote_number: int
    citation: Citation


class FootnoteParseResult(BaseModel):
    original: str
    sources: List[UniqueSource]
    segments: List[Union[TextSegment, FootnoteSegment]]


class MarkdownFootnotes(BaseModel):
    """Markdown with `[^n]` references plus the citation behind each number."""

    markdown: str
    citation_map: Dict[int, Citation]

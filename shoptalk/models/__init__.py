"""Typed models shared across the application."""

from .chunk import ChunkedDocument, ChunkingConfig, ChunkMetadata, ChunkStats, DocumentChunk
from .citation import (
    Citation,
    CitationSegment,
    FootnoteParseResult,
    FootnoteSegment,
    MarkdownFootnotes,
    ParseResult,
    TextSegment,
    UniqueSource,
)
from .document import ExtractedDocument, ExtractedPage, RawDocument, SectionHeader
from .qa import LocalDocumentsResponse, QARequest, QAResponse
from .retrieval import EvidenceBlock, RetrievalRequest, RetrievalResponse, RetrievedChunk
from .union import (
    ApplicableDocuments,
    Classification,
    ContractDocument,
    Local,
    LocalSearchResult,
    SupplementChain,
)

__all__ = [
    "ApplicableDocuments",
    "ChunkMetadata",
    "ChunkStats",
    "ChunkedDocument",
    "ChunkingConfig",
    "Citation",
    "CitationSegment",
    "Classification",
    "ContractDocument",
    "DocumentChunk",
    "EvidenceBlock",
    "ExtractedDocument",
    "ExtractedPage",
    "FootnoteParseResult",
    "FootnoteSegment",
    "Local",
    "LocalDocumentsResponse",
    "LocalSearchResult",
    "MarkdownFootnotes",
    "ParseResult",
    "QARequest",
    "QAResponse",
    "RawDocument",
    "RetrievalRequest",
    "RetrievalResponse",
    "RetrievedChunk",
    "SectionHeader",
    "SupplementChain",
    "TextSegment",
    "UniqueSource",
]

"""Chunk-level models used for indexing and retrieval."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field


class ChunkingConfig(BaseModel):
    """Size limits for splitting a document into chunks."""

    target_tokens: int = 400
    max_tokens: int = 500
    overlap_tokens: int = 50
    preserve_article_boundaries: bool = True

    @classmethod
    def from_settings(cls) -> "ChunkingConfig":
        from shoptalk.config import settings

        return cls(
            target_tokens=settings.chunk_target_tokens,
            max_tokens=settings.chunk_max_tokens,
            overlap_tokens=settings.chunk_overlap_tokens,
            preserve_article_boundaries=settings.chunk_preserve_article_boundaries,
        )


class ChunkMetadata(BaseModel):
    """Metadata describing where a chunk came from."""

    document_id: str
    article: Optional[str] = None
    section: Optional[str] = None
    page_start: int
    page_end: int
    token_count: int
    chunk_index: int


class DocumentChunk(BaseModel):
    """A chunk ready for embedding."""

    id: str
    content: str
    metadata: ChunkMetadata


class ChunkedDocument(BaseModel):
    """All chunks produced for one document."""

    document_id: str
    title: str
    chunks: List[DocumentChunk]
    chunked_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    config: ChunkingConfig


class ChunkStats(BaseModel):
    total_chunks: int
    avg_tokens: int
    min_tokens: int
    max_tokens: int
    articles_found: List[str] = Field(default_factory=list)

"""Retrieval request/response models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from .chunk import DocumentChunk


class RetrievedChunk(DocumentChunk):
    """Chunk returned from the vector store with its similarity score."""

    document_title: Optional[str] = None
    score: Optional[float] = None


class EvidenceBlock(BaseModel):
    """Evidence block grouped for prompting."""

    id: str
    document_id: str
    document_title: str
    article: Optional[str] = None
    section: Optional[str] = None
    page_start: int
    page_end: int
    citation_marker: str
    text: str


class RetrievalRequest(BaseModel):
    """Payload describing a scoped retrieval job."""

    question: str
    local_number: Optional[int] = None
    top_k: int = 5


class RetrievalResponse(BaseModel):
    question: str
    document_scope: List[str]
    chunks: List[RetrievedChunk]

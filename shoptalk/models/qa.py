"""Request/response models for the public API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .citation import Citation, UniqueSource
from .retrieval import EvidenceBlock
from .union import ApplicableDocuments


class QARequest(BaseModel):
    """Incoming question payload."""

    question: str = Field(..., min_length=3, max_length=2000)
    local_number: Optional[int] = Field(default=None, gt=0)
    classification: Optional[str] = None


class QAResponse(BaseModel):
    """Answer returned to the caller."""

    answer: str
    document_scope: List[str]
    citations: List[Citation]
    sources: List[UniqueSource]
    evidences: List[EvidenceBlock]


class LocalDocumentsResponse(BaseModel):
    """Documents that apply to a Local and the scope used for search."""

    local_number: int
    known_local: bool
    explicit_mapping: bool
    document_scope: List[str]
    documents: ApplicableDocuments

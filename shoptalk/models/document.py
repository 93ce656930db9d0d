"""Document-level data models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from shoptalk.errors import MalformedDocumentError
from shoptalk.models.union import DocumentType


class RawDocument(BaseModel):
    """Manifest entry for a contract PDF before processing."""

    id: str
    title: str
    short_title: str
    type: DocumentType
    file_path: str
    region: Optional[str] = None
    local_number: Optional[int] = None


class ExtractedPage(BaseModel):
    """Plain text of one PDF page."""

    page_number: int
    text: str


class ExtractedDocument(BaseModel):
    """Text extracted from a contract PDF, one entry per page."""

    document_id: str
    title: str
    page_count: int
    pages: List[ExtractedPage]
    extracted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def _check_pages(self) -> "ExtractedDocument":
        if len(self.pages) != self.page_count:
            raise MalformedDocumentError(
                f"{self.document_id}: page_count={self.page_count} "
                f"but {len(self.pages)} pages extracted"
            )
        for expected, page in enumerate(self.pages, start=1):
            if page.page_number != expected:
                raise MalformedDocumentError(
                    f"{self.document_id}: expected page {expected}, got {page.page_number}"
                )
        return self


class SectionHeader(BaseModel):
    """Article or section marker detected in page text."""

    article: Optional[str] = None
    section: Optional[str] = None
    header_text: str
    page_number: int
    offset: int

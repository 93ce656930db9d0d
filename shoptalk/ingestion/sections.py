"""Article/section header detection and page offset helpers."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from shoptalk.models.document import ExtractedDocument, ExtractedPage, SectionHeader

PAGE_SEPARATOR = "\n\n"

ARTICLE_PATTERN = re.compile(r"\b(?:ARTICLE|Article)\s+(\d+)\b")
SECTION_PATTERN = re.compile(r"\b(?:SECTION|Section)\s+(\d+(?:\.\d+)?(?:\([a-z]\))?)\b")


def detect_section_headers(pages: Iterable[ExtractedPage]) -> List[SectionHeader]:
    """Return article and section headers in reading order.

    Each page is scanned twice: articles first, then sections. The current
    article carries across pages. Sections are tagged with the article that
    is current once the page's article pass has finished, which is the last
    article on that page (or the carried one if the page has none). Existing
    chunk metadata depends on this attribution, so keep the two passes.
    """
    headers: List[SectionHeader] = []
    current_article: Optional[str] = None

    for page in pages:
        for match in ARTICLE_PATTERN.finditer(page.text):
            current_article = match.group(1)
            headers.append(
                SectionHeader(
                    article=current_article,
                    header_text=match.group(0),
                    page_number=page.page_number,
                    offset=match.start(),
                )
            )

        for match in SECTION_PATTERN.finditer(page.text):
            headers.append(
                SectionHeader(
                    article=current_article,
                    section=match.group(1),
                    header_text=match.group(0),
                    page_number=page.page_number,
                    offset=match.start(),
                )
            )

    return headers


def full_text(document: ExtractedDocument) -> str:
    return PAGE_SEPARATOR.join(page.text for page in document.pages)


def page_for_offset(document: ExtractedDocument, offset: int) -> int:
    """1-indexed page containing a full-text character offset."""
    page_end = 0
    for page in document.pages:
        page_end += len(page.text) + len(PAGE_SEPARATOR)
        if offset < page_end:
            return page.page_number
    return document.page_count

"""Utilities for assembling evidence blocks from retrieved chunks."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from shoptalk.citations.parser import build_citation_marker
from shoptalk.config import settings
from shoptalk.models.retrieval import EvidenceBlock, RetrievedChunk
from shoptalk.utils.tokenization import count_tokens, get_encoding, truncate_to_tokens

logger = logging.getLogger(__name__)


def _block_key(chunk: RetrievedChunk) -> Tuple[str, str]:
    meta = chunk.metadata
    if meta.article or meta.section:
        return (meta.document_id, f"{meta.article or ''}:{meta.section or ''}")
    return (meta.document_id, chunk.id)


def _new_block(chunk: RetrievedChunk) -> EvidenceBlock:
    meta = chunk.metadata
    return EvidenceBlock(
        id="",
        document_id=meta.document_id,
        document_title=chunk.document_title or meta.document_id,
        article=meta.article,
        section=meta.section,
        page_start=meta.page_start,
        page_end=meta.page_end,
        citation_marker="",
        text=chunk.content,
    )


def build_evidence_blocks(
    chunks: List[RetrievedChunk],
    max_blocks: Optional[int] = None,
    max_tokens: Optional[int] = None,
) -> List[EvidenceBlock]:
    """Group retrieved chunks into prompt-friendly evidence blocks.

    Chunks from the same article and section of a document are merged in
    retrieval order. Blocks are taken best-first until `max_blocks` or the
    token budget is reached; a first block larger than the whole budget is
    truncated rather than dropped.
    """
    if max_blocks is None:
        max_blocks = settings.max_evidence_blocks
    if max_tokens is None:
        max_tokens = settings.max_evidence_tokens
    encoding = get_encoding()

    grouped: Dict[Tuple[str, str], EvidenceBlock] = {}
    ordered: List[EvidenceBlock] = []

    for chunk in chunks:
        key = _block_key(chunk)
        block = grouped.get(key)
        if not block:
            block = _new_block(chunk)
            grouped[key] = block
            ordered.append(block)
        else:
            block.text = f"{block.text}\n\n{chunk.content}"
            block.page_start = min(block.page_start, chunk.metadata.page_start)
            block.page_end = max(block.page_end, chunk.metadata.page_end)

    selected: List[EvidenceBlock] = []
    tokens_left = max_tokens
    for block in ordered:
        if len(selected) >= max_blocks:
            break
        block_tokens = count_tokens(block.text, encoding)
        if block_tokens > tokens_left:
            if selected:
                break
            logger.warning(
                "Evidence from %s exceeds the %s token budget; truncating", block.document_id, max_tokens
            )
            block.text = truncate_to_tokens(block.text, tokens_left, encoding)
            block_tokens = tokens_left
        block.id = f"Evidence {len(selected) + 1}"
        block.citation_marker = build_citation_marker(
            block.document_id, block.article, block.section, block.page_start
        )
        tokens_left = max(tokens_left - block_tokens, 0)
        selected.append(block)
    return selected

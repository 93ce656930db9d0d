"""Split extracted contract text into overlapping, page-aware chunks."""

from __future__ import annotations

import argparse
import json
import logging
import math
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from shoptalk.config import settings
from shoptalk.ingestion.sections import (
    PAGE_SEPARATOR,
    detect_section_headers,
    full_text,
    page_for_offset,
)
from shoptalk.models.chunk import (
    ChunkedDocument,
    ChunkingConfig,
    ChunkMetadata,
    ChunkStats,
    DocumentChunk,
)
from shoptalk.models.document import ExtractedDocument, SectionHeader

logger = logging.getLogger(__name__)

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")

# English text averages roughly 1.3 OpenAI tokens per word.
TOKENS_PER_WORD = 1.3


def estimate_tokens(text: str) -> int:
    return math.ceil(len(text.split()) * TOKENS_PER_WORD)


def split_sentences(text: str) -> List[str]:
    return [part for part in SENTENCE_BOUNDARY.split(text) if part.strip()]


def build_chunk_id(document_id: str, chunk_index: int) -> str:
    return f"{document_id}-chunk-{chunk_index:04d}"


def page_offsets(document: ExtractedDocument) -> Dict[int, int]:
    """Map each page number to the offset where it starts in the full text."""
    offsets: Dict[int, int] = {}
    current = 0
    for page in document.pages:
        offsets[page.page_number] = current
        current += len(page.text) + len(PAGE_SEPARATOR)
    return offsets


def find_context(
    headers: Iterable[SectionHeader],
    offset: int,
    offsets: Dict[int, int],
) -> Tuple[Optional[str], Optional[str]]:
    """Article and section in force at a full-text offset."""
    article: Optional[str] = None
    section: Optional[str] = None
    for header in headers:
        absolute = offsets.get(header.page_number, 0) + header.offset
        if absolute > offset:
            continue
        if header.article:
            article = header.article
            # A new article does not inherit the previous article's section.
            if not header.section:
                section = None
        if header.section:
            section = header.section
    return article, section


def _build_chunk(
    document: ExtractedDocument,
    headers: List[SectionHeader],
    offsets: Dict[int, int],
    sentences: List[str],
    chunk_index: int,
    start_offset: int,
    end_offset: int,
) -> DocumentChunk:
    content = " ".join(sentences)
    article, section = find_context(headers, start_offset, offsets)
    return DocumentChunk(
        id=build_chunk_id(document.document_id, chunk_index),
        content=content,
        metadata=ChunkMetadata(
            document_id=document.document_id,
            article=article,
            section=section,
            page_start=page_for_offset(document, start_offset),
            page_end=page_for_offset(document, end_offset),
            token_count=estimate_tokens(content),
            chunk_index=chunk_index,
        ),
    )


def _overlap_tail(sentences: List[str], overlap_tokens: int) -> Tuple[List[str], int]:
    """Trailing sentences that fit in the overlap budget, in original order."""
    tail: List[str] = []
    tokens = 0
    for sentence in reversed(sentences):
        sentence_tokens = estimate_tokens(sentence)
        if tokens + sentence_tokens > overlap_tokens:
            break
        tail.insert(0, sentence)
        tokens += sentence_tokens
    return tail, tokens


def chunk_document(
    document: ExtractedDocument,
    config: Optional[ChunkingConfig] = None,
) -> ChunkedDocument:
    """Greedily pack sentences into chunks of at most `config.max_tokens`.

    A chunk closes when the next sentence would push it over the limit and
    it already holds a sentence, so a single oversized sentence becomes its
    own chunk. Each new chunk is seeded with trailing sentences of the
    previous one, up to `config.overlap_tokens`.

    The start offset of a seeded chunk is the previous end minus the length
    of the overlap text. This assumes sentences were separated by a single
    character; longer whitespace runs make it drift slightly.
    """
    config = config or ChunkingConfig()
    text = full_text(document)
    headers = detect_section_headers(document.pages)
    offsets = page_offsets(document)
    sentences = split_sentences(text)

    chunks: List[DocumentChunk] = []
    current: List[str] = []
    current_tokens = 0
    start_offset = 0

    for sentence in sentences:
        sentence_tokens = estimate_tokens(sentence)
        if current and current_tokens + sentence_tokens > config.max_tokens:
            end_offset = start_offset + len(" ".join(current))
            chunks.append(
                _build_chunk(
                    document, headers, offsets, current, len(chunks), start_offset, end_offset
                )
            )
            current, current_tokens = _overlap_tail(current, config.overlap_tokens)
            start_offset = end_offset - len(" ".join(current))

        current.append(sentence)
        current_tokens += sentence_tokens

    if current:
        chunks.append(
            _build_chunk(
                document, headers, offsets, current, len(chunks), start_offset, len(text)
            )
        )

    logger.debug("Chunked %s into %s chunks", document.document_id, len(chunks))
    return ChunkedDocument(
        document_id=document.document_id,
        title=document.title,
        chunks=chunks,
        config=config,
    )


def chunk_stats(chunked: ChunkedDocument) -> ChunkStats:
    token_counts = [chunk.metadata.token_count for chunk in chunked.chunks]
    if not token_counts:
        return ChunkStats(total_chunks=0, avg_tokens=0, min_tokens=0, max_tokens=0)
    articles = {chunk.metadata.article for chunk in chunked.chunks if chunk.metadata.article}
    return ChunkStats(
        total_chunks=len(token_counts),
        avg_tokens=math.floor(sum(token_counts) / len(token_counts) + 0.5),
        min_tokens=min(token_counts),
        max_tokens=max(token_counts),
        articles_found=sorted(articles, key=int),
    )


def read_extracted(path: Path) -> ExtractedDocument:
    with path.open("r", encoding="utf-8") as handle:
        return ExtractedDocument(**json.load(handle))


def iter_extracted(directory: Path, document_id: Optional[str] = None) -> Iterator[ExtractedDocument]:
    pattern = f"{document_id}.json" if document_id else "*.json"
    for path in sorted(directory.glob(pattern)):
        yield read_extracted(path)


def write_chunks(chunks: Iterable[DocumentChunk], output_path: Path) -> int:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with output_path.open("w", encoding="utf-8") as handle:
        for count, chunk in enumerate(chunks, start=1):
            handle.write(json.dumps(chunk.model_dump()) + "\n")
    return count


def read_chunks(path: Path) -> Iterator[DocumentChunk]:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            yield DocumentChunk(**json.loads(line))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Chunk extracted contract documents.")
    parser.add_argument("--id", dest="document_id", help="Chunk a single document")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)
    extracted_dir = settings.extracted_dir_path
    if not extracted_dir.exists():
        logger.error("Extracted documents not found at %s", extracted_dir)
        return

    config = ChunkingConfig.from_settings()
    chunks_path = settings.chunks_path_obj
    all_chunks: List[DocumentChunk] = []
    if args.document_id and chunks_path.exists():
        # Rows for the other documents are carried over unchanged.
        all_chunks.extend(
            chunk for chunk in read_chunks(chunks_path) if chunk.metadata.document_id != args.document_id
        )
    for document in iter_extracted(extracted_dir, args.document_id):
        chunked = chunk_document(document, config)
        stats = chunk_stats(chunked)
        logger.info(
            "%s: %s chunks (avg %s tokens, articles %s)",
            document.document_id,
            stats.total_chunks,
            stats.avg_tokens,
            ", ".join(stats.articles_found) or "none",
        )
        all_chunks.extend(chunked.chunks)

    total = write_chunks(all_chunks, chunks_path)
    logger.info("Wrote %s chunk rows to %s", total, settings.chunks_path)


if __name__ == "__main__":
    main()

"""Embed contract chunks and load them into Qdrant."""

from __future__ import annotations

import argparse
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from shoptalk.config import settings
from shoptalk.ingestion.chunking import read_chunks
from shoptalk.ingestion.manifest import get_manifest_entry
from shoptalk.models.chunk import DocumentChunk
from shoptalk.retrieval.embedder import EMBEDDING_DIM, embed_passages
from shoptalk.retrieval.vector_store import VectorStore

logger = logging.getLogger(__name__)

BATCH_SIZE = settings.embedding_batch_size


def chunk_batches(items: Iterable[DocumentChunk], batch_size: int) -> Iterable[List[DocumentChunk]]:
    batch: List[DocumentChunk] = []
    for item in items:
        batch.append(item)
        if len(batch) >= batch_size:
            yield batch
            batch = []
    if batch:
        yield batch


def group_by_document(chunks: Iterable[DocumentChunk]) -> Dict[str, List[DocumentChunk]]:
    grouped: Dict[str, List[DocumentChunk]] = defaultdict(list)
    for chunk in chunks:
        grouped[chunk.metadata.document_id].append(chunk)
    return grouped


def index_document(store: VectorStore, document_id: str, chunks: List[DocumentChunk]) -> int:
    """Replace a document's vectors with freshly embedded chunks."""
    raw = get_manifest_entry(document_id)
    title = raw.title if raw else document_id
    store.delete_document(document_id)
    count = 0
    for batch in chunk_batches(chunks, BATCH_SIZE):
        vectors = embed_passages(chunk.content for chunk in batch)
        count += store.upsert_chunks(batch, vectors, document_title=title)
    logger.info("Indexed %s vectors for %s", count, document_id)
    return count


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Index contract chunks into Qdrant.")
    parser.add_argument("--id", dest="document_id", help="Index a single document")
    parser.add_argument("--setup", action="store_true", help="Create the collection and exit")
    parser.add_argument("--stats", action="store_true", help="Show collection statistics")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)
    store = VectorStore()

    if args.stats:
        stats = store.stats()
        logger.info(
            "Collection %s: %s vectors, dimension %s, metric %s",
            stats["collection"], stats["count"], stats["dimension"], stats["metric"],
        )
        return

    store.ensure_collection(EMBEDDING_DIM)
    if args.setup:
        return

    chunks_path = settings.chunks_path_obj
    if not chunks_path.exists():
        logger.error("Chunk file %s does not exist. Run chunking first.", chunks_path)
        return

    grouped = group_by_document(read_chunks(chunks_path))
    if args.document_id:
        grouped = {args.document_id: grouped.get(args.document_id, [])}

    total = 0
    for document_id, chunks in grouped.items():
        if not chunks:
            logger.warning("No chunks found for %s", document_id)
            continue
        total += index_document(store, document_id, chunks)
    logger.info("Indexed %s chunks into Qdrant collection %s", total, store.collection)


if __name__ == "__main__":
    main()

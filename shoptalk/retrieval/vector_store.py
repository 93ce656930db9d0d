"""Qdrant-backed store for contract chunk embeddings."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional, Sequence

from qdrant_client import QdrantClient
from qdrant_client.http import models as qmodels

from shoptalk.config import settings
from shoptalk.models.chunk import ChunkMetadata, DocumentChunk
from shoptalk.models.retrieval import RetrievedChunk

logger = logging.getLogger(__name__)

DOCUMENT_ID_KEY = "document_id"


def point_id(chunk_id: str) -> str:
    return str(uuid.uuid5(uuid.NAMESPACE_DNS, chunk_id))


def scope_filter(document_ids: Sequence[str]) -> qmodels.Filter:
    """Restrict results to the given document IDs."""
    return qmodels.Filter(
        must=[
            qmodels.FieldCondition(
                key=DOCUMENT_ID_KEY,
                match=qmodels.MatchAny(any=list(document_ids)),
            )
        ]
    )


def document_filter(document_id: str) -> qmodels.Filter:
    return qmodels.Filter(
        must=[
            qmodels.FieldCondition(
                key=DOCUMENT_ID_KEY,
                match=qmodels.MatchValue(value=document_id),
            )
        ]
    )


def chunk_payload(chunk: DocumentChunk, document_title: Optional[str] = None) -> Dict[str, Any]:
    payload = chunk.metadata.model_dump()
    payload["chunk_id"] = chunk.id
    payload["content"] = chunk.content
    payload["document_title"] = document_title or chunk.metadata.document_id
    return payload


def chunk_from_payload(payload: Dict[str, Any], score: Optional[float]) -> RetrievedChunk:
    return RetrievedChunk(
        id=payload.get("chunk_id", ""),
        content=payload.get("content", ""),
        metadata=ChunkMetadata(
            document_id=payload[DOCUMENT_ID_KEY],
            article=payload.get("article"),
            section=payload.get("section"),
            page_start=payload.get("page_start", 1),
            page_end=payload.get("page_end", payload.get("page_start", 1)),
            token_count=payload.get("token_count", 0),
            chunk_index=payload.get("chunk_index", 0),
        ),
        document_title=payload.get("document_title"),
        score=float(score) if score is not None else None,
    )


class VectorStore:
    """Wrapper around the Qdrant collection holding contract chunks."""

    def __init__(
        self,
        url: str | None = None,
        api_key: str | None = None,
        collection: str | None = None,
        client: QdrantClient | None = None,
    ) -> None:
        self.client = client or QdrantClient(
            url=url or settings.qdrant_url,
            api_key=api_key or settings.qdrant_api_key,
        )
        self.collection = collection or settings.qdrant_collection

    def ensure_collection(self, dimension: int) -> bool:
        """Create the collection if missing; return True when it was created."""
        if self.client.collection_exists(self.collection):
            logger.info("Collection %s already exists", self.collection)
            return False
        self.client.create_collection(
            collection_name=self.collection,
            vectors_config=qmodels.VectorParams(size=dimension, distance=qmodels.Distance.COSINE),
        )
        self.client.create_payload_index(
            collection_name=self.collection,
            field_name=DOCUMENT_ID_KEY,
            field_schema=qmodels.PayloadSchemaType.KEYWORD,
        )
        logger.info("Created collection %s (%s dimensions)", self.collection, dimension)
        return True

    def delete_document(self, document_id: str) -> None:
        self.client.delete(
            collection_name=self.collection,
            points_selector=qmodels.FilterSelector(filter=document_filter(document_id)),
            wait=True,
        )

    def upsert_chunks(
        self,
        chunks: Sequence[DocumentChunk],
        vectors: Sequence[Sequence[float]],
        document_title: Optional[str] = None,
    ) -> int:
        if len(chunks) != len(vectors):
            raise ValueError(
                f"Chunk count ({len(chunks)}) doesn't match embedding count ({len(vectors)})"
            )
        points = [
            qmodels.PointStruct(
                id=point_id(chunk.id),
                vector=list(vector),
                payload=chunk_payload(chunk, document_title),
            )
            for chunk, vector in zip(chunks, vectors)
        ]
        if points:
            self.client.upsert(collection_name=self.collection, wait=True, points=points)
        return len(points)

    def search(
        self,
        query_vector: Sequence[float],
        document_ids: Sequence[str],
        top_k: int = 5,
    ) -> List[RetrievedChunk]:
        """Nearest chunks limited to `document_ids`."""
        response = self.client.query_points(
            collection_name=self.collection,
            query=list(query_vector),
            query_filter=scope_filter(document_ids),
            limit=top_k,
            with_payload=True,
        )
        return [chunk_from_payload(point.payload or {}, point.score) for point in response.points]

    def stats(self) -> Dict[str, Any]:
        info = self.client.get_collection(self.collection)
        vectors = info.config.params.vectors
        return {
            "collection": self.collection,
            "count": info.points_count or 0,
            "dimension": getattr(vectors, "size", None),
            "metric": str(getattr(vectors, "distance", "")),
        }

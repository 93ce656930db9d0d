"""Dense retrieval restricted to the contracts that apply to a Local."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from shoptalk.config import settings
from shoptalk.models.retrieval import RetrievalRequest, RetrievalResponse, RetrievedChunk
from shoptalk.retrieval.embedder import embed_queries
from shoptalk.retrieval.vector_store import VectorStore
from shoptalk.union.mapping import document_scope
from shoptalk.union.supplements import MASTER_AGREEMENT

logger = logging.getLogger(__name__)

QueryEmbedder = Callable[[str], Sequence[float]]


def _embed_query(question: str) -> Sequence[float]:
    return embed_queries([question])[0]


class ContractRetriever:
    """Searches only the documents in a Local's supplement chain."""

    def __init__(
        self,
        vector_store: VectorStore | None = None,
        embed_query: QueryEmbedder | None = None,
    ) -> None:
        self.vector_store = vector_store or VectorStore()
        self.embed_query = embed_query or _embed_query

    def scope_for(self, local_number: Optional[int]) -> List[str]:
        if local_number is None:
            logger.warning("No Local given; searching the master agreement only")
            return [MASTER_AGREEMENT.id]
        return document_scope(local_number)

    def query(
        self,
        question: str,
        local_number: Optional[int] = None,
        top_k: Optional[int] = None,
    ) -> List[RetrievedChunk]:
        return self.retrieve(
            RetrievalRequest(
                question=question,
                local_number=local_number,
                top_k=top_k or settings.retrieval_top_k,
            )
        ).chunks

    def retrieve(self, request: RetrievalRequest) -> RetrievalResponse:
        scope = self.scope_for(request.local_number)
        query_vector = self.embed_query(request.question)
        chunks = self.vector_store.search(query_vector, scope, top_k=request.top_k)
        logger.info(
            "Retrieved %s chunks for Local %s from %s",
            len(chunks), request.local_number, ", ".join(scope),
        )
        return RetrievalResponse(question=request.question, document_scope=scope, chunks=chunks)

"""BGE-M3 dense embeddings for contract chunks and member questions."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List

from FlagEmbedding import BGEM3FlagModel

from shoptalk.config import settings

EMBEDDING_DIM = 1024


@lru_cache(maxsize=1)
def get_bge_m3_embedder() -> BGEM3FlagModel:
    """Load the embedding model once per process."""
    return BGEM3FlagModel(settings.embedding_model, use_fp16=False, devices=settings.embedding_device)


def embed_passages(texts: Iterable[str]) -> List[List[float]]:
    """Dense vectors for chunk text, one per input in order."""
    output = get_bge_m3_embedder().encode_corpus(
        list(texts), batch_size=settings.embedding_batch_size
    )
    return [vector.tolist() for vector in output["dense_vecs"]]


def embed_queries(questions: Iterable[str]) -> List[List[float]]:
    output = get_bge_m3_embedder().encode_queries(list(questions))
    return [vector.tolist() for vector in output["dense_vecs"]]

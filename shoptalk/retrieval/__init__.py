"""Retrieval stack utilities."""

from .evidence import build_evidence_blocks
from .vector_store import VectorStore

__all__ = ["VectorStore", "build_evidence_blocks"]

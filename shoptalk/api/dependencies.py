"""Lazily constructed services shared by the API routes.

The retriever loads the embedding model and connects to Qdrant, and the
answer generator needs an OpenAI key, so both are built on first use and can
be replaced with `app.dependency_overrides` in tests.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shoptalk.llm.answer_generator import AnswerGenerator
    from shoptalk.retrieval.contract_query import ContractRetriever


@lru_cache(maxsize=1)
def get_retriever() -> "ContractRetriever":
    from shoptalk.retrieval.contract_query import ContractRetriever

    return ContractRetriever()


@lru_cache(maxsize=1)
def get_answer_generator() -> "AnswerGenerator":
    from shoptalk.llm.answer_generator import AnswerGenerator

    return AnswerGenerator()

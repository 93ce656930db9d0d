"""Retrieval scoped to a Local's contracts."""

import pytest

pytest.importorskip("FlagEmbedding")

from shoptalk.models.retrieval import RetrievalRequest  # noqa: E402
from shoptalk.retrieval.contract_query import ContractRetriever  # noqa: E402


class RecordingStore:
    def __init__(self):
        self.calls = []

    def search(self, query_vector, document_ids, top_k=5):
        self.calls.append((list(query_vector), list(document_ids), top_k))
        return []


def make_retriever():
    store = RecordingStore()
    return ContractRetriever(vector_store=store, embed_query=lambda question: [float(len(question))]), store


def test_query_is_scoped_to_local_chain():
    retriever, store = make_retriever()

    retriever.query("Is overtime voluntary?", local_number=135, top_k=4)

    assert store.calls == [([22.0], ["master", "central", "michigan-indiana", "local-135"], 4)]


def test_missing_local_searches_master_only(caplog):
    retriever, store = make_retriever()

    response = retriever.retrieve(RetrievalRequest(question="Vacation days?"))

    assert response.document_scope == ["master"]
    assert store.calls[0][1] == ["master"]
    assert "No Local given" in caplog.text


def test_unknown_local_searches_master_only():
    retriever, store = make_retriever()
    retriever.query("Vacation days?", local_number=999)
    assert store.calls[0][1] == ["master"]

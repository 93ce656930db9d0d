"""FastAPI application entry point."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import FileResponse

from shoptalk.api.dependencies import get_answer_generator, get_retriever
from shoptalk.citations.parser import extract_citations, parse_footnote_citations
from shoptalk.config import settings
from shoptalk.errors import DocumentAccessError, DocumentNotFoundError
from shoptalk.ingestion.manifest import resolve_contract_pdf
from shoptalk.llm.answer_generator import ensure_disclaimer
from shoptalk.llm.prompts import NO_RESULTS_MESSAGE
from shoptalk.models.qa import LocalDocumentsResponse, QARequest, QAResponse
from shoptalk.models.retrieval import RetrievalRequest
from shoptalk.models.union import LocalSearchResult
from shoptalk.retrieval.evidence import build_evidence_blocks
from shoptalk.union.locals import get_local_by_number
from shoptalk.union.mapping import applicable_documents, document_scope, has_explicit_mapping
from shoptalk.union.search import get_suggested_locals, search_locals
from shoptalk.union.user_context import build_user_context

logger = logging.getLogger(__name__)

app = FastAPI(
    title="ShopTalk",
    description="UPS Teamster contract question answering API",
    version="0.1.0",
)


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.get("/locals", response_model=List[LocalSearchResult])
def locals_search(
    q: str = "",
    limit: int = Query(default=10, ge=1, le=50),
) -> List[LocalSearchResult]:
    """Search Locals by number, city or state; suggestions when `q` is empty."""
    if not q.strip():
        return get_suggested_locals(limit)
    return search_locals(q, limit)


@app.get("/locals/{local_number}/documents", response_model=LocalDocumentsResponse)
def local_documents(local_number: int) -> LocalDocumentsResponse:
    if local_number <= 0:
        raise HTTPException(status_code=422, detail="Local number must be positive.")
    return LocalDocumentsResponse(
        local_number=local_number,
        known_local=get_local_by_number(local_number) is not None,
        explicit_mapping=has_explicit_mapping(local_number),
        document_scope=document_scope(local_number),
        documents=applicable_documents(local_number),
    )


@app.get("/pdf/{document_id}")
def contract_pdf(document_id: str, local_number: Optional[int] = None) -> FileResponse:
    """Serve a contract PDF if it applies to the caller's Local."""
    try:
        path = resolve_contract_pdf(document_id, local_number)
    except DocumentAccessError as exc:
        logger.info("Refused %s for Local %s", document_id, local_number)
        raise HTTPException(status_code=403, detail="Document not in your scope.") from exc
    except DocumentNotFoundError as exc:
        logger.error("PDF unavailable: %s", exc)
        raise HTTPException(status_code=404, detail="Document not found.") from exc

    return FileResponse(
        path,
        media_type="application/pdf",
        filename=f"{document_id}.pdf",
        content_disposition_type="inline",
        headers={"Cache-Control": "private, max-age=604800"},
    )


@app.post("/ask", response_model=QAResponse)
def ask(
    payload: QARequest,
    retriever=Depends(get_retriever),
    answer_generator=Depends(get_answer_generator),
) -> QAResponse:
    """Answer a member question from the contracts that apply to their Local."""
    retrieval = retriever.retrieve(
        RetrievalRequest(
            question=payload.question,
            local_number=payload.local_number,
            top_k=settings.retrieval_top_k,
        )
    )
    evidences = build_evidence_blocks(retrieval.chunks)
    if not evidences:
        logger.info("No contract language found for %r", payload.question)
        return QAResponse(
            answer=ensure_disclaimer(NO_RESULTS_MESSAGE),
            document_scope=retrieval.document_scope,
            citations=[],
            sources=[],
            evidences=[],
        )

    user_context = build_user_context(payload.local_number, payload.classification)
    try:
        answer = answer_generator.generate(payload.question, evidences, user_context.formatted)
    except Exception as exc:
        logger.error("LLM generation failed: %s", exc)
        raise HTTPException(status_code=500, detail="Answer generation failed.") from exc

    return QAResponse(
        answer=answer,
        document_scope=retrieval.document_scope,
        citations=extract_citations(answer),
        sources=parse_footnote_citations(answer).sources,
        evidences=evidences,
    )

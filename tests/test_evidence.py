"""Evidence block assembly for the answer prompt."""

import pytest

from shoptalk.llm.answer_generator import ensure_disclaimer
from shoptalk.llm.prompts import SYSTEM_PROMPT, build_user_prompt
from shoptalk.models.chunk import ChunkMetadata
from shoptalk.models.retrieval import RetrievedChunk
from shoptalk.retrieval import evidence
from shoptalk.retrieval.evidence import build_evidence_blocks


@pytest.fixture(autouse=True)
def whitespace_tokens(monkeypatch):
    monkeypatch.setattr(evidence, "get_encoding", lambda: None)


def make_chunk(index, content, document_id="master", article=None, section=None, page=1):
    return RetrievedChunk(
        id=f"{document_id}-chunk-{index:04d}",
        content=content,
        metadata=ChunkMetadata(
            document_id=document_id,
            article=article,
            section=section,
            page_start=page,
            page_end=page,
            token_count=len(content.split()),
            chunk_index=index,
        ),
        document_title=f"{document_id.title()} Agreement",
        score=0.9,
    )


def test_chunks_from_same_section_are_merged():
    chunks = [
        make_chunk(3, "Overtime after eight hours.", article="12", section="1", page=67),
        make_chunk(0, "Western sixth day rule.", document_id="western", article="8", page=34),
        make_chunk(2, "Overtime is voluntary.", article="12", section="1", page=66),
    ]

    blocks = build_evidence_blocks(chunks, max_blocks=5, max_tokens=100)

    assert [block.id for block in blocks] == ["Evidence 1", "Evidence 2"]
    merged = blocks[0]
    assert merged.text == "Overtime after eight hours.\n\nOvertime is voluntary."
    assert (merged.page_start, merged.page_end) == (66, 67)
    assert merged.citation_marker == "[Doc: master, Art: 12, Sec: 1, Page: 66]"
    assert blocks[1].citation_marker == "[Doc: western, Art: 8, Page: 34]"
    assert blocks[1].document_title == "Western Agreement"


def test_chunks_without_headers_stay_separate():
    chunks = [make_chunk(0, "Preamble text."), make_chunk(1, "More preamble.")]
    blocks = build_evidence_blocks(chunks, max_blocks=5, max_tokens=100)
    assert len(blocks) == 2
    assert blocks[0].citation_marker == "[Doc: master, Page: 1]"


def test_block_and_token_limits():
    chunks = [make_chunk(i, "one two three four five", article=str(i)) for i in range(1, 6)]

    assert len(build_evidence_blocks(chunks, max_blocks=2, max_tokens=100)) == 2
    assert len(build_evidence_blocks(chunks, max_blocks=10, max_tokens=12)) == 2


def test_oversized_first_block_is_truncated():
    chunks = [make_chunk(0, " ".join(["word"] * 50), article="1")]

    blocks = build_evidence_blocks(chunks, max_blocks=3, max_tokens=10)

    assert len(blocks) == 1
    assert len(blocks[0].text.split()) == 10


def test_no_chunks_no_blocks():
    assert build_evidence_blocks([], max_blocks=3, max_tokens=10) == []


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------

def test_user_prompt_carries_context_and_markers():
    blocks = build_evidence_blocks(
        [make_chunk(0, "Overtime after eight hours.", article="12", page=67)], max_blocks=1, max_tokens=50
    )

    prompt = build_user_prompt("When does overtime start?", blocks, "**Local:** Teamsters Local 705")

    assert prompt.startswith("Member:\n**Local:** Teamsters Local 705")
    assert "Cite as: [Doc: master, Art: 12, Page: 67]" in prompt
    assert "[Evidence 1] Master Agreement - Article 12, page 67" in prompt


def test_system_prompt_states_marker_format():
    assert "[Doc: {documentId}, Art: {article}, Sec: {section}, Page: {pageStart}]" in SYSTEM_PROMPT
    assert "[Doc: northern-california, Page: 8]" in SYSTEM_PROMPT


def test_disclaimer_added_once():
    answer = ensure_disclaimer("Overtime starts after 8 hours.", "Not legal advice")
    assert answer == "Overtime starts after 8 hours.\n\n---\n*Not legal advice.*"
    assert ensure_disclaimer(answer, "Not legal advice") == answer

"""Sentence-based chunking of extracted contracts."""

import pytest

from shoptalk.config import settings
from shoptalk.ingestion.chunking import (
    build_chunk_id,
    chunk_document,
    chunk_stats,
    estimate_tokens,
    find_context,
    main,
    read_chunks,
    split_sentences,
    write_chunks,
)
from shoptalk.models.chunk import ChunkedDocument, ChunkingConfig, ChunkMetadata, DocumentChunk
from shoptalk.models.document import ExtractedDocument, ExtractedPage, SectionHeader


def make_document(*texts, document_id="master"):
    pages = [ExtractedPage(page_number=i, text=text) for i, text in enumerate(texts, start=1)]
    return ExtractedDocument(document_id=document_id, title="Master", page_count=len(pages), pages=pages)


def numbered_sentences(count):
    return [
        f"Sentence number {i} describes a rule for drivers and helpers today."
        for i in range(count)
    ]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def test_estimate_tokens_rounds_up():
    assert estimate_tokens("one two three") == 4
    assert estimate_tokens("") == 0
    assert estimate_tokens("  spaced   words  ") == 3


def test_split_sentences_drops_empty_fragments():
    assert split_sentences("First rule. Second rule!  Third?\n\nFourth") == [
        "First rule.",
        "Second rule!",
        "Third?",
        "Fourth",
    ]


def test_chunk_ids_are_zero_padded():
    assert build_chunk_id("western", 7) == "western-chunk-0007"


# ---------------------------------------------------------------------------
# Chunk boundaries
# ---------------------------------------------------------------------------

def test_chunks_respect_token_limit_and_ids_are_sequential():
    sentences = numbered_sentences(40)
    document = make_document(" ".join(sentences[:20]), " ".join(sentences[20:]))
    config = ChunkingConfig(max_tokens=100, overlap_tokens=30)

    chunked = chunk_document(document, config)

    assert len(chunked.chunks) > 1
    for index, chunk in enumerate(chunked.chunks):
        assert chunk.id == f"master-chunk-{index:04d}"
        assert chunk.metadata.chunk_index == index
        assert chunk.metadata.token_count <= config.max_tokens
        assert chunk.metadata.token_count == estimate_tokens(chunk.content)


def test_every_sentence_is_covered_in_order():
    sentences = numbered_sentences(30)
    document = make_document(" ".join(sentences))

    chunked = chunk_document(document, ChunkingConfig(max_tokens=80, overlap_tokens=20))

    seen = []
    for chunk in chunked.chunks:
        for sentence in split_sentences(chunk.content):
            if sentence not in seen:
                seen.append(sentence)
    assert seen == sentences


def test_overlap_seeds_next_chunk():
    sentences = numbered_sentences(10)
    document = make_document(" ".join(sentences))

    chunked = chunk_document(document, ChunkingConfig(max_tokens=100, overlap_tokens=30))

    first, second = chunked.chunks[0], chunked.chunks[1]
    # Each sentence is 15 tokens, so two of them fit the overlap budget.
    assert split_sentences(second.content)[:2] == split_sentences(first.content)[-2:]


def test_oversized_sentence_becomes_its_own_chunk():
    long_sentence = " ".join(["word"] * 100) + "."
    document = make_document(long_sentence)

    chunked = chunk_document(document, ChunkingConfig(max_tokens=50, overlap_tokens=0))

    assert len(chunked.chunks) == 1
    assert chunked.chunks[0].metadata.token_count == 130


def test_empty_document_has_no_chunks():
    chunked = chunk_document(make_document(""))
    assert chunked.chunks == []
    assert chunk_stats(chunked).total_chunks == 0


def test_default_config_is_used():
    chunked = chunk_document(make_document("Short text."))
    assert chunked.config == ChunkingConfig()
    assert chunked.chunks[0].content == "Short text."


# ---------------------------------------------------------------------------
# Page and article metadata
# ---------------------------------------------------------------------------

def test_new_article_resets_section():
    document = make_document(
        "Article 1 Wages. Section 3 Pay is weekly.",
        "Article 2 Hours. The day is eight hours.",
    )

    chunked = chunk_document(document, ChunkingConfig(max_tokens=4, overlap_tokens=0))

    first, last = chunked.chunks[0], chunked.chunks[-1]
    assert first.content == "Article 1 Wages."
    assert (first.metadata.article, first.metadata.section) == ("1", None)
    assert first.metadata.page_start == first.metadata.page_end == 1

    assert last.content == "The day is eight hours."
    assert (last.metadata.article, last.metadata.section) == ("2", None)
    assert last.metadata.page_start == last.metadata.page_end == 2


def test_find_context_keeps_last_header_before_offset():
    headers = [
        SectionHeader(article="1", header_text="Article 1", page_number=1, offset=0),
        SectionHeader(article="1", section="3", header_text="Section 3", page_number=1, offset=20),
        SectionHeader(article="2", header_text="Article 2", page_number=2, offset=0),
    ]
    offsets = {1: 0, 2: 100}

    assert find_context(headers, 10, offsets) == ("1", None)
    assert find_context(headers, 50, offsets) == ("1", "3")
    assert find_context(headers, 100, offsets) == ("2", None)


def test_chunk_spanning_pages_records_page_range():
    page_one = " ".join(numbered_sentences(3))
    page_two = "Closing sentence on the second page."
    document = make_document(page_one, page_two)

    chunked = chunk_document(document, ChunkingConfig(max_tokens=500, overlap_tokens=0))

    assert len(chunked.chunks) == 1
    assert chunked.chunks[0].metadata.page_start == 1
    assert chunked.chunks[0].metadata.page_end == 2


# ---------------------------------------------------------------------------
# Stats and persistence
# ---------------------------------------------------------------------------

def test_chunk_stats_sorts_articles_numerically():
    chunks = [
        DocumentChunk(
            id=build_chunk_id("master", index),
            content=content,
            metadata=ChunkMetadata(
                document_id="master",
                article=article,
                page_start=1,
                page_end=1,
                token_count=tokens,
                chunk_index=index,
            ),
        )
        for index, (content, article, tokens) in enumerate(
            [("Pay.", "10", 4), ("Hours.", "2", 5), ("Leave.", "9", 4), ("Notes.", None, 2)]
        )
    ]
    chunked = ChunkedDocument(document_id="master", title="Master", chunks=chunks, config=ChunkingConfig())

    stats = chunk_stats(chunked)

    assert stats.total_chunks == 4
    assert stats.articles_found == ["2", "9", "10"]
    assert (stats.min_tokens, stats.max_tokens, stats.avg_tokens) == (2, 5, 4)


def test_write_and_read_chunks(tmp_path):
    chunked = chunk_document(make_document(" ".join(numbered_sentences(12))), ChunkingConfig(max_tokens=60))
    path = tmp_path / "chunks" / "contract_chunks.jsonl"

    written = write_chunks(chunked.chunks, path)

    assert written == len(chunked.chunks)
    assert list(read_chunks(path)) == chunked.chunks


@pytest.mark.parametrize("config", [ChunkingConfig(), ChunkingConfig(max_tokens=20, overlap_tokens=5)])
def test_chunks_belong_to_document(config):
    chunked = chunk_document(make_document(" ".join(numbered_sentences(8)), document_id="western"), config)
    assert {chunk.metadata.document_id for chunk in chunked.chunks} == {"western"}


def test_rechunking_one_document_keeps_the_others(tmp_path, monkeypatch):
    extracted_dir = tmp_path / "extracted"
    extracted_dir.mkdir()
    for document_id in ("master", "western"):
        document = make_document(" ".join(numbered_sentences(6)), document_id=document_id)
        (extracted_dir / f"{document_id}.json").write_text(document.model_dump_json(), encoding="utf-8")
    chunks_path = tmp_path / "chunks" / "contract_chunks.jsonl"
    monkeypatch.setattr(settings, "extracted_dir", str(extracted_dir))
    monkeypatch.setattr(settings, "chunks_path", str(chunks_path))

    main([])
    before = list(read_chunks(chunks_path))
    main(["--id", "western"])
    after = list(read_chunks(chunks_path))

    assert {chunk.metadata.document_id for chunk in before} == {"master", "western"}
    assert sorted(chunk.id for chunk in after) == sorted(chunk.id for chunk in before)
    assert [chunk for chunk in after if chunk.metadata.document_id == "master"] == [
        chunk for chunk in before if chunk.metadata.document_id == "master"
    ]

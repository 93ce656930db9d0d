"""Citation marker parsing and rendering."""

import pytest

from shoptalk.citations import (
    build_citation_marker,
    extract_citations,
    format_citation,
    has_citations,
    parse_citations,
    parse_footnote_citations,
    strip_citations,
    transform_to_markdown_footnotes,
)
from shoptalk.models.citation import Citation, CitationSegment, TextSegment


def reassemble(segments):
    return "".join(
        segment.content if isinstance(segment, TextSegment) else segment.citation.raw
        for segment in segments
    )


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def test_parse_splits_text_and_citations():
    text = "Overtime is paid [Doc: master, Art: 12, Page: 67] after 8 hours."

    result = parse_citations(text)

    assert result.original == text
    assert [segment.type for segment in result.segments] == ["text", "citation", "text"]
    assert result.segments[0].content == "Overtime is paid "
    citation = result.segments[1].citation
    assert (citation.document_id, citation.article, citation.section, citation.page) == (
        "master", "12", None, 67,
    )
    assert citation.raw == "[Doc: master, Art: 12, Page: 67]"
    assert result.segments[2].content == " after 8 hours."


@pytest.mark.parametrize(
    "text",
    [
        "",
        "No citations here.",
        "[Doc: master]",
        "[Doc: western, Art: 3, Page: 12][Doc: northern-california, Page: 8]",
        "Lead [Doc: master, Art: 6, Sec: 2, Page: 45] middle [Doc: bad trail",
        "[Doc: master, Page: x] and [Doc master] stay as text\n\n",
    ],
)
def test_segments_reassemble_original(text):
    assert reassemble(parse_citations(text).segments) == text


def test_optional_fields_keep_their_order():
    citations = extract_citations(
        "[Doc: master, Art: 6, Sec: 2, Page: 45] [Doc: western, Art: 3, Page: 12] "
        "[Doc: northern-california, Page: 8] [Doc: local-804]"
    )

    assert [(c.document_id, c.article, c.section, c.page) for c in citations] == [
        ("master", "6", "2", 45),
        ("western", "3", None, 12),
        ("northern-california", None, None, 8),
        ("local-804", None, None, None),
    ]


@pytest.mark.parametrize(
    "text",
    [
        "[Doc master, Page: 3]",
        "[Doc: master, Page: x]",
        "[Doc: master, Page: 3, Art: 2]",
        "(Doc: master)",
        "[Doc: ]",
    ],
)
def test_malformed_markers_are_plain_text(text):
    assert not has_citations(text)
    assert extract_citations(text) == []
    assert parse_citations(text).segments == [TextSegment(content=text)]


def test_has_citations_is_repeatable():
    text = "See [Doc: master, Page: 1]."
    assert has_citations(text)
    assert has_citations(text)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def test_short_and_full_formats():
    citation = Citation(document_id="northern-california", article="6", section="2", page=45, raw="")

    assert format_citation(citation, "short") == "Northern California Art. 6"
    assert format_citation(citation, "full") == "Northern California, Article 6, Section 2, Page 45"
    assert format_citation(citation) == "Northern California Art. 6"


def test_short_format_falls_back_to_page():
    assert format_citation(Citation(document_id="western", page=12, raw="")) == "Western p.12"
    assert format_citation(Citation(document_id="local-804", raw="")) == "Local 804"


def test_full_format_omits_missing_fields():
    citation = Citation(document_id="master", section="4", raw="")
    assert format_citation(citation, "full") == "Master, Section 4"


# ---------------------------------------------------------------------------
# Stripping
# ---------------------------------------------------------------------------

def test_strip_removes_markers_and_extra_spaces():
    text = "  Pay is weekly [Doc: master, Page: 3] and  fair [Doc: western]. "
    assert strip_citations(text) == "Pay is weekly and fair ."


@pytest.mark.parametrize(
    "text",
    [
        "Pay is weekly [Doc: master, Page: 3] and fair.",
        "[Doc: [Doc: master]master]",
        "Line one.\n\n[Doc: master]\n\nLine two.",
        "",
    ],
)
def test_strip_is_idempotent(text):
    once = strip_citations(text)
    assert strip_citations(once) == once
    assert not has_citations(once)


# ---------------------------------------------------------------------------
# Footnotes
# ---------------------------------------------------------------------------

ANSWER = (
    "Overtime starts after 8 hours [Doc: master, Art: 12, Page: 67]. "
    "Sixth-day work is premium [Doc: western, Art: 8, Page: 34]. "
    "Refusals are limited [Doc: master, Art: 12, Page: 67]."
)


def test_repeated_sources_share_footnote_numbers():
    result = parse_footnote_citations(ANSWER)

    assert [source.footnote_number for source in result.sources] == [1, 2]
    assert [source.occurrences for source in result.sources] == [2, 1]
    numbers = [segment.footnote_number for segment in result.segments if segment.type == "footnote"]
    assert numbers == [1, 2, 1]


def test_footnote_segments_keep_their_own_marker():
    text = "Pay [Doc: master, Page: 3] and hours [Doc:master,Page:3]."

    result = parse_footnote_citations(text)

    assert reassemble(result.segments) == text
    assert result.sources[0].citation.raw == "[Doc: master, Page: 3]"
    assert result.sources[0].occurrences == 2


def test_markers_with_non_breaking_spaces_are_parsed():
    text = "Breaks [Doc:\u00a0master,\u00a0Art:\u00a010] apply."

    (citation,) = extract_citations(text)

    assert (citation.document_id, citation.article) == ("master", "10")
    assert strip_citations(text) == "Breaks apply."


def test_section_distinguishes_sources():
    result = parse_footnote_citations(
        "[Doc: master, Art: 12, Sec: 1, Page: 67] [Doc: master, Art: 12, Page: 67]"
    )
    assert len(result.sources) == 2


def test_markdown_footnotes():
    result = transform_to_markdown_footnotes(ANSWER)

    assert result.markdown == (
        "Overtime starts after 8 hours [^1]. "
        "Sixth-day work is premium [^2]. "
        "Refusals are limited [^1].\n\n"
        "[^1]: Master, Article 12, Page 67\n"
        "[^2]: Western, Article 8, Page 34"
    )
    assert sorted(result.citation_map) == [1, 2]
    assert result.citation_map[2].document_id == "western"


def test_markdown_without_citations_is_unchanged():
    result = transform_to_markdown_footnotes("Nothing cited.")
    assert result.markdown == "Nothing cited."
    assert result.citation_map == {}


# ---------------------------------------------------------------------------
# Marker construction
# ---------------------------------------------------------------------------

def test_build_marker_round_trips():
    marker = build_citation_marker("master", "12", "1", 67)

    assert marker == "[Doc: master, Art: 12, Sec: 1, Page: 67]"
    (citation,) = extract_citations(marker)
    assert (citation.document_id, citation.article, citation.section, citation.page) == (
        "master", "12", "1", 67,
    )


def test_build_marker_omits_missing_fields_and_cleans_sections():
    assert build_citation_marker("western", None, None, 12) == "[Doc: western, Page: 12]"
    marker = build_citation_marker("central", "3", "2(a)", 9)
    assert marker == "[Doc: central, Art: 3, Sec: 2a, Page: 9]"
    assert isinstance(parse_citations(marker).segments[0], CitationSegment)

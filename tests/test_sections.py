"""Article and section header detection."""

from shoptalk.ingestion.sections import detect_section_headers, full_text, page_for_offset
from shoptalk.models.document import ExtractedDocument, ExtractedPage


def make_pages(*texts):
    return [ExtractedPage(page_number=i, text=text) for i, text in enumerate(texts, start=1)]


def make_document(*texts):
    pages = make_pages(*texts)
    return ExtractedDocument(document_id="master", title="Master", page_count=len(pages), pages=pages)


def test_detects_articles_and_sections_with_offsets():
    headers = detect_section_headers(make_pages("ARTICLE 12 Overtime. Section 3.1 Daily overtime."))

    assert [(h.article, h.section, h.header_text) for h in headers] == [
        ("12", None, "ARTICLE 12"),
        ("12", "3.1", "Section 3.1"),
    ]
    assert headers[0].offset == 0
    assert headers[1].offset == 21
    assert all(h.page_number == 1 for h in headers)


def test_lowercase_keywords_are_not_headers():
    assert detect_section_headers(make_pages("see article 4 and section 2 of the rider")) == []


def test_current_article_carries_across_pages():
    headers = detect_section_headers(make_pages("Article 4 Seniority", "Section 2 Layoffs"))

    section = headers[-1]
    assert section.page_number == 2
    assert section.article == "4"
    assert section.section == "2"


def test_sections_take_the_last_article_on_their_page():
    headers = detect_section_headers(
        make_pages("Article 4 Seniority", "Section 7 Bidding. Article 5 Pay.")
    )

    # Articles of a page are reported before its sections.
    assert [(h.page_number, h.article, h.section) for h in headers] == [
        (1, "4", None),
        (2, "5", None),
        (2, "5", "7"),
    ]


def test_section_before_any_article_has_no_article():
    headers = detect_section_headers(make_pages("Section 1 Recognition"))
    assert headers[0].article is None
    assert headers[0].section == "1"


def test_full_text_and_page_lookup():
    document = make_document("abc", "defg")

    assert full_text(document) == "abc\n\ndefg"
    assert page_for_offset(document, 0) == 1
    assert page_for_offset(document, 4) == 1
    assert page_for_offset(document, 5) == 2
    assert page_for_offset(document, 500) == 2

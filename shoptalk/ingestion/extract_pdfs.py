"""Extract per-page text from contract PDFs."""

from __future__ import annotations

import argparse
import logging
import re
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional

import fitz

from shoptalk.config import settings
from shoptalk.ingestion.manifest import DOCUMENT_MANIFEST, get_manifest_entry, resolve_pdf_path
from shoptalk.models.document import ExtractedDocument, ExtractedPage, RawDocument

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s+")


def normalize_page_text(text: str) -> str:
    return WHITESPACE.sub(" ", text).strip()


def extract_pdf(path: Path, document_id: str, title: str) -> ExtractedDocument:
    """Read a PDF into one whitespace-normalized text entry per page."""
    doc = fitz.open(path)
    try:
        pages = [
            ExtractedPage(page_number=index + 1, text=normalize_page_text(page.get_text("text")))
            for index, page in enumerate(doc)
        ]
        page_count = doc.page_count
    finally:
        doc.close()
    logger.debug("Extracted %s pages from %s", page_count, path)
    return ExtractedDocument(
        document_id=document_id,
        title=title,
        page_count=page_count,
        pages=pages,
    )


def save_extracted(document: ExtractedDocument, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{document.document_id}.json"
    output_path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
    return output_path


def extract_document(raw: RawDocument) -> Optional[ExtractedDocument]:
    path = resolve_pdf_path(raw)
    if not path.exists():
        logger.error("File not found: %s", raw.file_path)
        return None
    logger.info("Extracting %s", raw.short_title)
    return extract_pdf(path, raw.id, raw.title)


def list_documents(documents: List[RawDocument]) -> None:
    by_type: Dict[str, List[RawDocument]] = defaultdict(list)
    for raw in documents:
        by_type[raw.type].append(raw)
    for doc_type, entries in by_type.items():
        print(f"{doc_type.upper()}:")
        for raw in entries:
            status = "ok" if resolve_pdf_path(raw).exists() else "missing"
            print(f"  [{status:>7}] {raw.id:<30} {raw.short_title}")
        print()
    print(f"Total: {len(documents)} documents")


def select_documents(document_id: Optional[str]) -> List[RawDocument]:
    if not document_id:
        return list(DOCUMENT_MANIFEST)
    raw = get_manifest_entry(document_id)
    if raw is None:
        raise SystemExit(f"Document not found: {document_id}. Use --list to see available documents.")
    return [raw]


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Extract text from contract PDFs.")
    parser.add_argument("--id", dest="document_id", help="Extract a single document")
    parser.add_argument("--list", action="store_true", help="List manifest documents")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)
    if args.list:
        list_documents(DOCUMENT_MANIFEST)
        return

    success = failed = 0
    for raw in select_documents(args.document_id):
        try:
            extracted = extract_document(raw)
        except (RuntimeError, ValueError) as exc:
            logger.error("Extraction failed for %s: %s", raw.id, exc)
            extracted = None
        if extracted is None:
            failed += 1
            continue
        output = save_extracted(extracted, settings.extracted_dir_path)
        logger.info("Saved %s (%s pages)", output, extracted.page_count)
        success += 1
    logger.info("Extraction complete: %s succeeded, %s failed", success, failed)


if __name__ == "__main__":
    main()

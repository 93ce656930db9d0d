"""Consistency checks between Local mappings, the document catalogue and the manifest.

Errors: a mapping references an ID missing from the catalogue, or a manifest
PDF is missing on disk. Warnings: catalogue entries with no manifest entry
(phantom), manifest entries not in the catalogue (orphaned), and catalogue
entries no Local uses (unreferenced).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from shoptalk.config import settings
from shoptalk.ingestion.manifest import DOCUMENT_MANIFEST, resolve_pdf_path
from shoptalk.models.document import RawDocument
from shoptalk.union.mapping import referenced_document_ids
from shoptalk.union.supplements import MASTER_AGREEMENT, all_document_ids

logger = logging.getLogger(__name__)


class ValidationReport(BaseModel):
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_mappings(
    manifest: Optional[List[RawDocument]] = None,
    root: Optional[Path] = None,
    check_files: bool = True,
) -> ValidationReport:
    manifest = DOCUMENT_MANIFEST if manifest is None else manifest
    report = ValidationReport()

    catalogue_ids = set(all_document_ids())
    manifest_ids = {doc.id for doc in manifest}
    referenced = referenced_document_ids()
    mapping_ids = referenced["supplements"] | referenced["riders"]

    for document_id in sorted(mapping_ids - catalogue_ids):
        report.errors.append(f"Mapping references {document_id!r} but it is not in the catalogue")

    if check_files:
        for doc in manifest:
            if not resolve_pdf_path(doc, root).exists():
                report.errors.append(f"Missing PDF {doc.file_path} for document {doc.id!r}")

    for document_id in sorted(catalogue_ids - manifest_ids):
        report.warnings.append(f"Phantom document {document_id!r}: catalogued but not in manifest")

    for document_id in sorted(manifest_ids - catalogue_ids):
        report.warnings.append(f"Orphaned document {document_id!r}: in manifest but not catalogued")

    for document_id in sorted(catalogue_ids - mapping_ids - {MASTER_AGREEMENT.id}):
        report.warnings.append(f"Unreferenced document {document_id!r}: no Local uses it")

    return report


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    report = validate_mappings()
    for error in report.errors:
        logger.error(error)
    for warning in report.warnings:
        logger.warning(warning)
    if not report.ok:
        logger.error("Validation failed with %s error(s)", len(report.errors))
        sys.exit(1)
    logger.info("Validation passed with %s warning(s)", len(report.warnings))


if __name__ == "__main__":
    main()

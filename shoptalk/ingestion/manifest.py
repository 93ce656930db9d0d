"""Source PDFs for the contract corpus."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from shoptalk.config import settings
from shoptalk.errors import DocumentAccessError, DocumentNotFoundError
from shoptalk.models.document import RawDocument
from shoptalk.models.union import DocumentType
from shoptalk.union.mapping import document_scope
from shoptalk.union.supplements import MASTER_AGREEMENT


def _entry(
    id: str,
    title: str,
    short_title: str,
    type: DocumentType,
    file_name: str,
    region: Optional[str] = None,
    local_number: Optional[int] = None,
) -> RawDocument:
    return RawDocument(
        id=id,
        title=title,
        short_title=short_title,
        type=type,
        file_path=f"data/contracts/{file_name}",
        region=region,
        local_number=local_number,
    )


DOCUMENT_MANIFEST: List[RawDocument] = [
    _entry("master", "UPS Teamsters National Master Agreement 2023-2028",
           "National Master Agreement", "master", "master.pdf"),
    # Regional supplements
    _entry("western", "Western Region of Teamsters UPS Supplemental Agreement",
           "Western Region Supplement", "supplement", "western.pdf", region="western"),
    _entry("central", "Central Region of Teamsters UPS Supplemental Agreement",
           "Central Region Supplement", "supplement", "central.pdf", region="central"),
    _entry("southern", "Southern Region of Teamsters UPS Supplemental Agreement",
           "Southern Region Supplement", "supplement", "southern.pdf", region="southern"),
    _entry("atlantic", "Atlantic Area UPS Supplemental Agreement",
           "Atlantic Area Supplement", "supplement", "atlantic.pdf", region="atlantic"),
    _entry("new-england", "New England Supplemental Agreement",
           "New England Supplement", "supplement", "new-england.pdf", region="eastern"),
    # Local agreements
    _entry("local-804", "Local 804 UPS Supplemental Agreement",
           "Local 804 Agreement", "local", "local-804.pdf", local_number=804),
    _entry("local-243", "Local 243 Metro Detroit Supplemental Agreement",
           "Local 243 Detroit", "local", "local-243-metro-detroit.pdf", local_number=243),
    # Riders
    _entry("northern-california", "Northern California Supplemental Agreement and Sort Rider",
           "NorCal Supplement", "rider", "northern-california.pdf", region="western"),
    _entry("southwest-package", "Southwest Package and Sort Riders",
           "Southwest Package Rider", "rider", "southwest-package-sort.pdf", region="western"),
    _entry("ohio-valley", "Ohio Rider", "Ohio Rider", "rider", "ohio-rider.pdf", region="central"),
    _entry("michigan-indiana", "Michigan Rider", "Michigan Rider", "rider",
           "michigan-rider.pdf", region="central"),
    _entry("central-pa", "Central Pennsylvania Supplemental Agreement",
           "Central PA Supplement", "rider", "central-pa.pdf", region="atlantic"),
    _entry("western-pa", "Western Pennsylvania Supplemental Agreement",
           "Western PA Supplement", "rider", "western-pa.pdf", region="atlantic"),
    _entry("metro-philadelphia", "Metro Philadelphia Supplemental Agreement",
           "Metro Philadelphia", "rider", "metro-philadelphia.pdf", region="atlantic"),
    _entry("upstate-ny", "Upstate and Western New York Supplemental Agreement",
           "Upstate NY Supplement", "rider", "upstate-west-ny.pdf", region="eastern"),
    _entry("local-177-drivers", "Local 177 Drivers Rider", "Local 177 Drivers", "local",
           "local-177-drivers.pdf", local_number=177),
    _entry("local-177-mechanics", "Local 177 Mechanics Rider", "Local 177 Mechanics", "local",
           "local-177-mechanics.pdf", local_number=177),
    _entry("local-89-louisville-air", "Local 89 Louisville Air Rider", "Local 89 Air", "local",
           "local-89-louisville-air.pdf", local_number=89),
    _entry("local-135", "Local 135 Rider", "Local 135", "local", "local-135.pdf",
           local_number=135),
    _entry("local-623", "Local 623 Supplemental Agreement", "Local 623", "local",
           "local-623.pdf", local_number=623),
    _entry("local-959-alaska", "Local 959 Alaska Full-Time and Part-Time Riders",
           "Local 959 Alaska", "local", "local-959-alaska.pdf", local_number=959),
    _entry("local-996-hawaii", "Local 996 Hawaii Supplemental Agreement",
           "Local 996 Hawaii", "local", "local-996-hawaii.pdf", local_number=996),
    _entry("local-769-latin-america", "Local 769 Latin America Inc Rider",
           "Local 769 Latin America", "local", "local-769-latin-america.pdf", local_number=769),
    # Joint council riders
    _entry("jc3-feeder-package-mechanics",
           "Joint Council 3 Feeder, Package, Mechanics and Combination Employees Rider",
           "JC3 Rider", "rider", "jc3-feeder-package-mechanics.pdf", region="western"),
    _entry("jc28-sort-rider", "Joint Council 28 Rider and Sort Addendum", "JC28 Rider",
           "rider", "jc28-sort-rider.pdf", region="western"),
    _entry("jc37-package-sort", "Joint Council 37 Package and Sort Riders", "JC37 Rider",
           "rider", "jc37-package-sort.pdf", region="western"),
    # Specialty agreements
    _entry("southwest-automotive", "Southwest Automotive and Utility Addendum",
           "SW Automotive", "rider", "southwest-automotive.pdf", region="western"),
    _entry("cartage-services", "Cartage Services Inc Supplemental Agreement",
           "Cartage Services", "supplement", "cartage-services.pdf"),
    _entry("trailer-conditioners", "Trailer Conditioners Inc (TCI) Supplemental Agreement",
           "Trailer Conditioners", "supplement", "trailer-conditioners.pdf"),
]


def get_manifest_entry(document_id: str) -> Optional[RawDocument]:
    for document in DOCUMENT_MANIFEST:
        if document.id == document_id:
            return document
    return None


def get_documents_by_type(document_type: DocumentType) -> List[RawDocument]:
    return [doc for doc in DOCUMENT_MANIFEST if doc.type == document_type]


def get_documents_by_region(region: str) -> List[RawDocument]:
    return [doc for doc in DOCUMENT_MANIFEST if doc.region == region]


def resolve_pdf_path(document: RawDocument, root: Optional[Path] = None) -> Path:
    return (root or settings.contracts_root_path) / document.file_path


def resolve_contract_pdf(
    document_id: str,
    local_number: Optional[int] = None,
    root: Optional[Path] = None,
) -> Path:
    """Path of a contract PDF the given Local may open.

    Without a Local only the master agreement is in scope. Raises
    DocumentAccessError for documents outside the scope and
    DocumentNotFoundError when the document or its file is missing.
    """
    scope = document_scope(local_number) if local_number else [MASTER_AGREEMENT.id]
    if document_id not in scope:
        raise DocumentAccessError(document_id, scope)

    document = get_manifest_entry(document_id)
    if document is None:
        raise DocumentNotFoundError(document_id)

    path = resolve_pdf_path(document, root)
    if not path.is_file():
        raise DocumentNotFoundError(document_id)
    return path

"""Catalogue of contract documents: master agreement, supplements and riders."""

from __future__ import annotations

from typing import Dict, List, Optional

from shoptalk.models.union import ContractDocument

MASTER_AGREEMENT = ContractDocument(
    id="master",
    name="National Master UPS Agreement",
    short_name="Master Agreement",
    type="master",
    description="The primary collective bargaining agreement covering all UPS Teamsters nationwide",
)


def _catalogue(*documents: ContractDocument) -> Dict[str, ContractDocument]:
    return {document.id: document for document in documents}


SUPPLEMENTS: Dict[str, ContractDocument] = _catalogue(
    ContractDocument(
        id="western",
        name="Western Region of Teamsters United Parcel Service Supplemental Agreement",
        short_name="Western Supplement",
        type="supplement",
        description=(
            "Covers California, Oregon, Washington, Nevada, Arizona, Colorado, Utah, "
            "New Mexico, Wyoming, Montana, Idaho, Hawaii, and Alaska"
        ),
    ),
    ContractDocument(
        id="central",
        name="Central Region of Teamsters and United Parcel Service Supplemental Agreement",
        short_name="Central Supplement",
        type="supplement",
        description=(
            "Covers Illinois, Indiana, Ohio, Michigan, Wisconsin, Minnesota, Iowa, "
            "Missouri, Kansas, Nebraska, North Dakota, and South Dakota"
        ),
    ),
    ContractDocument(
        id="southern",
        name="Southern Region of Teamsters and United Parcel Service Supplemental Agreement",
        short_name="Southern Supplement",
        type="supplement",
        description=(
            "Covers Texas, Louisiana, Arkansas, Oklahoma, Mississippi, Alabama, "
            "Tennessee, and Kentucky"
        ),
    ),
    ContractDocument(
        id="atlantic",
        name="Atlantic Area Teamsters and United Parcel Service Supplemental Agreement",
        short_name="Atlantic Supplement",
        type="supplement",
        description=(
            "Covers Pennsylvania, New Jersey, Delaware, Maryland, Virginia, "
            "West Virginia, and Washington D.C."
        ),
    ),
    ContractDocument(
        id="eastern",
        name="Eastern Region of Teamsters United Parcel Service Supplemental Agreement",
        short_name="Eastern Supplement",
        type="supplement",
        description=(
            "Covers New York (outside 804), Connecticut, Massachusetts, New Hampshire, "
            "Vermont, Maine, and Rhode Island"
        ),
    ),
    # Standalone Locals: these replace the regional supplement entirely.
    ContractDocument(
        id="local-804",
        name="Local 804 and United Parcel Service Supplemental Agreement",
        short_name="Local 804 Agreement",
        type="local",
        description="Standalone agreement for Local 804 (NYC metropolitan area)",
    ),
    ContractDocument(
        id="local-705",
        name="Local 705 and United Parcel Service Supplemental Agreement",
        short_name="Local 705 Agreement",
        type="local",
        description="Standalone agreement for Local 705 (Chicago metropolitan area)",
    ),
    ContractDocument(
        id="local-710",
        name="Local 710 and United Parcel Service Supplemental Agreement",
        short_name="Local 710 Agreement",
        type="local",
        description="Standalone agreement for Local 710 (Chicago area)",
    ),
)


def _rider(id: str, name: str, short_name: str, description: str) -> ContractDocument:
    return ContractDocument(
        id=id, name=name, short_name=short_name, type="rider", description=description
    )


RIDERS: Dict[str, ContractDocument] = _catalogue(
    _rider("southwest-package", "Southwest Package Rider", "SW Package Rider",
           "Additional provisions for select Western Region locals"),
    _rider("northern-california", "Northern California Rider", "NorCal Rider",
           "Additional provisions for Northern California locals"),
    _rider("southern-california", "Southern California Rider", "SoCal Rider",
           "Additional provisions for Southern California locals"),
    _rider("new-england", "New England Rider", "New England Rider",
           "Additional provisions for New England locals"),
    _rider("upstate-ny", "Upstate New York Rider", "Upstate NY Rider",
           "Additional provisions for upstate New York locals"),
    _rider("texas", "Texas Rider", "Texas Rider",
           "Additional provisions for Texas locals"),
    _rider("ohio-valley", "Ohio Valley Rider", "Ohio Valley Rider",
           "Additional provisions for Ohio Valley locals"),
    _rider("michigan-indiana", "Michigan-Indiana Rider", "MI-IN Rider",
           "Additional provisions for Michigan and Indiana locals"),
    _rider("local-177-drivers", "Local 177 Drivers Rider", "Local 177 Drivers",
           "Additional provisions for Local 177 drivers (New Jersey)"),
    _rider("local-177-mechanics", "Local 177 Mechanics Rider", "Local 177 Mechanics",
           "Additional provisions for Local 177 mechanics (New Jersey)"),
    # Atlantic region
    _rider("central-pa", "Central Pennsylvania Supplemental Agreement", "Central PA",
           "Additional provisions for Central Pennsylvania locals"),
    _rider("western-pa", "Western Pennsylvania Supplemental Agreement", "Western PA",
           "Additional provisions for Western Pennsylvania locals"),
    _rider("metro-philadelphia", "Metro Philadelphia Supplemental Agreement", "Metro Philly",
           "Additional provisions for Metro Philadelphia locals"),
    _rider("local-623", "Local 623 Supplemental Agreement", "Local 623",
           "Additional provisions for Local 623 (Philadelphia)"),
    # Central region
    _rider("local-243", "Local 243 Metro Detroit Supplemental Agreement", "Local 243 Detroit",
           "Additional provisions for Local 243 (Detroit)"),
    _rider("local-135", "Local 135 Rider", "Local 135",
           "Additional provisions for Local 135 (Indianapolis)"),
    # Southern region
    _rider("local-89-louisville-air", "Local 89 Louisville Air Rider", "Local 89 Air",
           "Additional provisions for Local 89 Louisville Air operations"),
    _rider("local-769-latin-america", "Local 769 Latin America Inc Rider",
           "Local 769 Latin America",
           "Additional provisions for Local 769 Latin America operations"),
    # Western region
    _rider("local-959-alaska", "Local 959 Alaska Full-Time and Part-Time Riders",
           "Local 959 Alaska", "Additional provisions for Local 959 (Alaska)"),
    _rider("local-996-hawaii", "Local 996 Hawaii Supplemental Agreement", "Local 996 Hawaii",
           "Additional provisions for Local 996 (Hawaii)"),
    _rider("jc3-feeder-package-mechanics", "Joint Council 3 Feeder, Package, Mechanics Rider",
           "JC3 Rider", "Joint Council 3 provisions for OR/WA area"),
    _rider("jc28-sort-rider", "Joint Council 28 Rider and Sort Addendum", "JC28 Rider",
           "Joint Council 28 provisions for WA area"),
    _rider("jc37-package-sort", "Joint Council 37 Package and Sort Riders", "JC37 Rider",
           "Joint Council 37 provisions for CA area"),
    _rider("southwest-automotive", "Southwest Automotive and Utility Addendum", "SW Automotive",
           "Southwest automotive and utility provisions"),
    # Specialty agreements
    _rider("cartage-services", "Cartage Services Inc Supplemental Agreement", "Cartage Services",
           "Provisions for Cartage Services Inc employees"),
    _rider("trailer-conditioners", "Trailer Conditioners Inc Supplemental Agreement",
           "Trailer Conditioners", "Provisions for Trailer Conditioners Inc employees"),
)


def get_supplement(document_id: str) -> Optional[ContractDocument]:
    return SUPPLEMENTS.get(document_id)


def get_rider(document_id: str) -> Optional[ContractDocument]:
    return RIDERS.get(document_id)


def get_document(document_id: str) -> Optional[ContractDocument]:
    """Look up the master agreement, a supplement or a rider by ID."""
    if document_id == MASTER_AGREEMENT.id:
        return MASTER_AGREEMENT
    return SUPPLEMENTS.get(document_id) or RIDERS.get(document_id)


def all_document_ids() -> List[str]:
    return [MASTER_AGREEMENT.id, *SUPPLEMENTS, *RIDERS]

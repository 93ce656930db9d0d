"""Resolve which contract documents apply to a Local union.

Every Local is covered by the National Master Agreement. On top of it sits
either the regional supplement or, for three Locals, a standalone agreement
that replaces it; some Locals also carry one or more riders. The master
agreement is never stored in a chain: consumers add it as the first entry.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from shoptalk.models.union import ApplicableDocuments, Region, SupplementChain
from shoptalk.union.locals import get_local_by_number
from shoptalk.union.supplements import MASTER_AGREEMENT, get_document

logger = logging.getLogger(__name__)


def _rider_group(
    region: Region, riders: Tuple[str, ...], numbers: Iterable[int]
) -> Dict[int, SupplementChain]:
    chain = SupplementChain(region=region, supplements=(region,), riders=riders)
    return {number: chain for number in numbers}


LOCAL_SUPPLEMENT_MAP: Dict[int, SupplementChain] = {
    # Standalone agreements
    705: SupplementChain(region="central", supplements=("local-705",)),
    710: SupplementChain(region="central", supplements=("local-710",)),
    804: SupplementChain(region="eastern", supplements=("local-804",)),
    # Western
    **_rider_group(
        "western",
        ("northern-california",),
        (63, 70, 150, 287, 315, 350, 386, 492, 601, 853, 856, 890, 912),
    ),
    **_rider_group("western", ("southern-california",), (166, 399, 481, 572, 630, 848, 986)),
    **_rider_group("western", ("southwest-package",), (14, 104, 274, 396, 533, 542, 631)),
    **_rider_group("western", ("local-959-alaska",), (959,)),
    **_rider_group("western", ("local-996-hawaii",), (996,)),
    # Eastern
    **_rider_group(
        "eastern", ("new-england",), (25, 170, 251, 340, 379, 404, 597, 633, 653, 671)
    ),
    **_rider_group("eastern", ("upstate-ny",), (118, 182, 264, 294, 317, 449, 529, 687)),
    # Central
    **_rider_group(
        "central",
        ("ohio-valley",),
        (20, 40, 92, 100, 114, 244, 284, 377, 407, 413, 416, 436, 480, 507, 637, 957),
    ),
    **_rider_group(
        "central",
        ("michigan-indiana",),
        (142, 215, 247, 283, 299, 332, 337, 339, 364, 406, 414),
    ),
    **_rider_group("central", ("michigan-indiana", "local-135"), (135,)),
    **_rider_group("central", ("michigan-indiana", "local-243"), (243,)),
    # Southern
    **_rider_group("southern", ("texas",), (19, 47, 577, 657, 745, 767, 988)),
    **_rider_group("southern", ("local-89-louisville-air",), (89,)),
    **_rider_group("southern", ("local-769-latin-america",), (769,)),
    # Atlantic
    **_rider_group("atlantic", ("local-177-drivers", "local-177-mechanics"), (177,)),
    **_rider_group("atlantic", ("central-pa",), (229, 401, 764)),
    **_rider_group("atlantic", ("western-pa",), (169, 249, 430, 771)),
    **_rider_group("atlantic", ("metro-philadelphia",), (107, 115)),
    **_rider_group("atlantic", ("local-623",), (623,)),
}

DEFAULT_REGION_CHAINS: Dict[Region, SupplementChain] = {
    region: SupplementChain(region=region, supplements=(region,))
    for region in ("western", "central", "eastern", "atlantic", "southern")
}


def resolve_chain(local_number: int) -> Optional[SupplementChain]:
    """Return the supplement chain for a Local, or None when the Local is unknown.

    Explicit entries win; otherwise the Local's region default applies.
    """
    explicit = LOCAL_SUPPLEMENT_MAP.get(local_number)
    if explicit is not None:
        return explicit

    local = get_local_by_number(local_number)
    if local is not None:
        return DEFAULT_REGION_CHAINS[local.region]

    return None


def document_scope(local_number: int) -> List[str]:
    """Document IDs a member of the Local may read and search, master first.

    Unknown Locals get master-only scope rather than an error.
    """
    chain = resolve_chain(local_number)
    if chain is None:
        logger.debug("Local %s is unknown; scoping to master only", local_number)
        return [MASTER_AGREEMENT.id]
    return [MASTER_AGREEMENT.id, *chain.supplements, *chain.riders]


def applicable_documents(local_number: int) -> ApplicableDocuments:
    """Full document records for a Local's chain; unknown IDs are skipped."""
    chain = resolve_chain(local_number)
    supplements = []
    riders = []
    if chain is not None:
        supplements = [doc for doc in map(get_document, chain.supplements) if doc]
        riders = [doc for doc in map(get_document, chain.riders) if doc]
    return ApplicableDocuments(master=MASTER_AGREEMENT, supplements=supplements, riders=riders)


def has_explicit_mapping(local_number: int) -> bool:
    return local_number in LOCAL_SUPPLEMENT_MAP


def referenced_document_ids() -> Dict[str, set[str]]:
    """Supplement and rider IDs used anywhere in the mapping tables."""
    supplements: set[str] = set()
    riders: set[str] = set()
    for chain in [*LOCAL_SUPPLEMENT_MAP.values(), *DEFAULT_REGION_CHAINS.values()]:
        supplements.update(chain.supplements)
        riders.update(chain.riders)
    return {"supplements": supplements, "riders": riders}

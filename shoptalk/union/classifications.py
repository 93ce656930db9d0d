"""Job classifications for UPS Teamster members, most common first."""

from __future__ import annotations

from typing import List, Optional

from shoptalk.models.union import Classification

CLASSIFICATIONS: List[Classification] = [
    Classification(
        id="rpcd",
        label="Package Car Driver (RPCD)",
        description="Regular Package Car Driver - full-time delivery driver",
    ),
    Classification(
        id="feeder",
        label="Feeder Driver",
        description="Tractor-trailer driver moving freight between hubs",
    ),
    Classification(
        id="pt-hub",
        label="Part-Time Hub/Sort",
        description="Part-time package handler, loader, or sorter",
    ),
    Classification(
        id="22.3",
        label="22.3 Combination",
        description="Full-time combination job (two part-time positions)",
    ),
    Classification(
        id="22.4",
        label="22.4 Driver",
        description="Hybrid driver with inside work and delivery duties",
    ),
    Classification(
        id="air",
        label="Air Driver",
        description="Driver handling air packages and time-critical deliveries",
    ),
    Classification(
        id="automotive",
        label="Automotive/Mechanic",
        description="Vehicle maintenance and repair technician",
    ),
    Classification(id="clerical", label="Clerical", description="Office and administrative positions"),
    Classification(id="other", label="Other", description="Other job classification not listed above"),
]


def get_classification(classification_id: str) -> Optional[Classification]:
    for classification in CLASSIFICATIONS:
        if classification.id == classification_id:
            return classification
    return None


def get_classification_label(classification_id: str) -> str:
    classification = get_classification(classification_id)
    return classification.label if classification else classification_id


def is_valid_classification(classification_id: str) -> bool:
    return get_classification(classification_id) is not None

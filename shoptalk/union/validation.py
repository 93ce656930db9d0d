"""Input validation for Local numbers and classifications."""

from __future__ import annotations

from typing import Optional

from shoptalk.union.classifications import is_valid_classification
from shoptalk.union.search import is_valid_local_number

MAX_OTHER_CLASSIFICATION_LENGTH = 100


def parse_local_number(value: str) -> int:
    """Parse a form value into a known Local number."""
    cleaned = value.strip()
    if not cleaned:
        raise ValueError("Local number is required")
    if not (cleaned.isascii() and cleaned.isdigit()):
        raise ValueError("Local number must contain only digits")
    number = int(cleaned)
    if number <= 0:
        raise ValueError("Local number must be positive")
    if not is_valid_local_number(number):
        raise ValueError("Please select a valid Local union number")
    return number


def normalize_classification(classification: str, other_text: Optional[str] = None) -> str:
    """Return the stored form of a classification (`other: <text>` for free text)."""
    if not is_valid_classification(classification):
        raise ValueError("Please select a valid job classification")
    if classification != "other":
        return classification
    text = (other_text or "").strip()
    if not text:
        raise ValueError("Please describe your job classification")
    if len(text) > MAX_OTHER_CLASSIFICATION_LENGTH:
        raise ValueError("Classification description must be 100 characters or less")
    return f"other: {text}"

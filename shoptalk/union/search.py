"""Local union search for onboarding and settings pickers."""

from __future__ import annotations

import unicodedata
from typing import List

from shoptalk.models.union import Local, LocalSearchResult
from shoptalk.union.locals import LOCALS, format_local_display, get_local_by_number

# Large Locals across regions, shown before the user types.
SUGGESTED_LOCAL_NUMBERS = (396, 804, 705, 25, 177, 767, 104, 480)


def normalize_for_search(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.strip()


def match_score(local: Local, query: str) -> int:
    """Score how well a Local matches a query; 0 means no match.

    Number: exact 100, prefix 80, substring 60. City: prefix 50 or
    substring 30. State code exact 40. Name substring 20.
    """
    normalized = normalize_for_search(query)
    if not normalized:
        return 1

    score = 0
    if normalized.isascii() and normalized.isdigit():
        number_text = str(local.number)
        if local.number == int(normalized):
            score += 100
        elif number_text.startswith(normalized):
            score += 80
        elif normalized in number_text:
            score += 60

    city = normalize_for_search(local.city)
    if city.startswith(normalized):
        score += 50
    elif normalized in city:
        score += 30

    if normalize_for_search(local.state) == normalized:
        score += 40

    if normalized in normalize_for_search(local.name):
        score += 20

    return score


def _result(local: Local, score: int) -> LocalSearchResult:
    return LocalSearchResult(
        **local.model_dump(),
        display_name=format_local_display(local),
        match_score=score,
    )


def search_locals(query: str, limit: int = 10) -> List[LocalSearchResult]:
    """Matching Locals, best score first, then by Local number."""
    results = []
    for local in LOCALS:
        score = match_score(local, query)
        if score > 0:
            results.append(_result(local, score))
    results.sort(key=lambda item: (-item.match_score, item.number))
    return results[:limit]


def get_suggested_locals(limit: int = 6) -> List[LocalSearchResult]:
    suggestions = []
    for number in SUGGESTED_LOCAL_NUMBERS[:limit]:
        local = get_local_by_number(number)
        if local is not None:
            suggestions.append(_result(local, 1))
    return suggestions


def get_autocomplete_suggestions(text: str, max_results: int = 8) -> List[LocalSearchResult]:
    if not text.strip():
        return get_suggested_locals(max_results)
    return search_locals(text.strip(), max_results)


def is_valid_local_number(local_number: int) -> bool:
    return get_local_by_number(local_number) is not None

"""tiktoken helpers for budgeting evidence sent to the model."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

import tiktoken

from shoptalk.config import settings

logger = logging.getLogger(__name__)

ENCODING_NAME = "cl100k_base"


@lru_cache(maxsize=1)
def get_encoding() -> Optional[tiktoken.Encoding]:
    """Load the OpenAI tokenizer once.

    Returns None when it cannot be loaded and ALLOW_TIKTOKEN_FALLBACK is set;
    callers then fall back to whitespace counts.
    """
    try:
        return tiktoken.get_encoding(ENCODING_NAME)
    except Exception as exc:
        if not settings.allow_tiktoken_fallback:
            raise RuntimeError(
                f"Failed to load tiktoken {ENCODING_NAME!r}: {exc}. "
                "Set ALLOW_TIKTOKEN_FALLBACK=1 to use whitespace token counts."
            ) from exc
        logger.warning(
            "Failed to load tiktoken %r (%s); using whitespace token approximation.",
            ENCODING_NAME,
            exc,
        )
        return None


def count_tokens(text: str, encoding: Optional[tiktoken.Encoding]) -> int:
    if encoding:
        return len(encoding.encode(text))
    return len(text.split())


def truncate_to_tokens(text: str, max_tokens: int, encoding: Optional[tiktoken.Encoding]) -> str:
    """Cut text down to at most `max_tokens` tokens."""
    if max_tokens <= 0:
        return ""
    if encoding:
        tokens = encoding.encode(text)
        if len(tokens) <= max_tokens:
            return text
        return encoding.decode(tokens[:max_tokens])
    words = text.split()
    if len(words) <= max_tokens:
        return text
    return " ".join(words[:max_tokens])

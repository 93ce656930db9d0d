"""Thin wrapper around the OpenAI Responses API."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from openai import OpenAI

from shoptalk.config import settings

logger = logging.getLogger(__name__)


class OpenAIChatClient:
    """Single-turn completions for answer generation."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[OpenAI] = None,
    ) -> None:
        self.model = model or settings.openai_model_chat
        if client is not None:
            self.client = client
            return
        api_key = api_key or settings.openai_api_key
        if not api_key:
            raise ValueError("OPENAI_API_KEY is not configured in the environment.")
        self.client = OpenAI(api_key=api_key, base_url=base_url or settings.openai_base_url)

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.2,
        max_output_tokens: int = 1200,
    ) -> str:
        response = self.client.responses.create(
            model=self.model,
            instructions=system_prompt,
            input=user_prompt,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        usage = getattr(response, "usage", None)
        if usage is not None:
            logger.debug(
                "OpenAI usage: %s input / %s output tokens",
                getattr(usage, "input_tokens", None),
                getattr(usage, "output_tokens", None),
            )
        return self._extract_text(response)

    @staticmethod
    def _extract_text(response: Any) -> str:
        parts: List[str] = []
        for item in getattr(response, "output", None) or []:
            for content in getattr(item, "content", None) or []:
                if getattr(content, "type", None) == "output_text" and getattr(content, "text", None):
                    parts.append(content.text.strip())
        return "\n".join(part for part in parts if part).strip()

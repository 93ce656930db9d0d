"""Glue module that turns evidence blocks into an answer via OpenAI."""

from __future__ import annotations

from typing import Iterable

from shoptalk.config import settings
from shoptalk.llm.openai_client import OpenAIChatClient
from shoptalk.llm.prompts import SYSTEM_PROMPT, build_user_prompt
from shoptalk.models.retrieval import EvidenceBlock


def ensure_disclaimer(answer: str, disclaimer: str | None = None) -> str:
    disclaimer = (disclaimer if disclaimer is not None else settings.legal_disclaimer).strip()
    if disclaimer and disclaimer.lower() not in answer.lower():
        answer = f"{answer.rstrip()}\n\n---\n*{disclaimer}.*"
    return answer.strip()


class AnswerGenerator:
    """Generates contract-grounded answers with inline citations."""

    def __init__(self, client: OpenAIChatClient | None = None) -> None:
        self.client = client or OpenAIChatClient()

    def generate(self, question: str, evidences: Iterable[EvidenceBlock], user_context: str = "") -> str:
        prompt = build_user_prompt(question, list(evidences), user_context)
        raw_answer = self.client.complete(SYSTEM_PROMPT, prompt)
        return ensure_disclaimer(raw_answer)

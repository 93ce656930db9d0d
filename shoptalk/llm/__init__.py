"""LLM integration helpers."""

from .answer_generator import AnswerGenerator, ensure_disclaimer
from .openai_client import OpenAIChatClient

__all__ = ["AnswerGenerator", "OpenAIChatClient", "ensure_disclaimer"]

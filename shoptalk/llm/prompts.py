"""Prompt templates for the question answering stage."""

from __future__ import annotations

from typing import Iterable

from shoptalk.models.retrieval import EvidenceBlock

NO_RESULTS_MESSAGE = (
    "I couldn't find specific information about that in your applicable contracts. "
    "Could you rephrase your question or ask about a related topic?"
)

SYSTEM_PROMPT = f"""You are ShopTalk, an assistant helping UPS Teamsters understand their union contracts.
You work from the National Master Agreement, regional supplements, and local riders.
Use only the provided evidence blocks. Never invent or assume contract language.
Output only the final answer, with no narration about searching or planning.

Cite every factual claim immediately after the claim using this exact format:
[Doc: {{documentId}}, Art: {{article}}, Sec: {{section}}, Page: {{pageStart}}]

Examples:
- [Doc: master, Art: 6, Sec: 2, Page: 45]
- [Doc: western, Art: 3, Page: 12]
- [Doc: northern-california, Page: 8]

Leave out Art or Sec when the evidence has none. Copy the citation marker given with each evidence block.
When several documents address a topic, note any differences between them.
If the evidence does not answer the question, reply: "{NO_RESULTS_MESSAGE}\""""


def format_evidence_block(block: EvidenceBlock) -> str:
    location = []
    if block.article:
        location.append(f"Article {block.article}")
    if block.section:
        location.append(f"Section {block.section}")
    if block.page_start == block.page_end:
        location.append(f"page {block.page_start}")
    else:
        location.append(f"pages {block.page_start}-{block.page_end}")
    return (
        f"[{block.id}] {block.document_title} - {', '.join(location)}\n"
        f"Cite as: {block.citation_marker}\n"
        f"{block.text.strip()}"
    )


def build_user_prompt(question: str, evidences: Iterable[EvidenceBlock], user_context: str = "") -> str:
    evidence_sections = "\n\n".join(format_evidence_block(block) for block in evidences)
    context_section = f"Member:\n{user_context.strip()}\n\n" if user_context.strip() else ""
    return f"""{context_section}Question:
{question.strip()}

Evidence:
{evidence_sections}

Instructions:
- Answer in plain language and explain contract terms when needed.
- Support every claim with the citation marker of its evidence block.
- Use headings or bullet points for longer answers."""

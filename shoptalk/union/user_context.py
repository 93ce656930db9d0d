"""Member context header shown at the top of every answer."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from shoptalk.union.classifications import get_classification_label
from shoptalk.union.locals import get_local_by_number
from shoptalk.union.mapping import applicable_documents
from shoptalk.union.supplements import MASTER_AGREEMENT

OTHER_PREFIX = "other:"


class ContractLink(BaseModel):
    id: str
    name: str

    @property
    def marker(self) -> str:
        return f"[[contract:{self.id}:{self.name}]]"


class UserContext(BaseModel):
    position: str
    local_number: Optional[int] = None
    local_name: Optional[str] = None
    contract_chain: List[str]
    formatted: str


def parse_classification(value: Optional[str]) -> str:
    """Display label for a stored classification, including `other: <text>`."""
    if not value:
        return "Unknown Position"
    if value.startswith(OTHER_PREFIX):
        return value[len(OTHER_PREFIX):].strip() or "Other"
    return get_classification_label(value)


def contract_links(local_number: Optional[int]) -> List[ContractLink]:
    if not local_number:
        return [ContractLink(id=MASTER_AGREEMENT.id, name="National Master Agreement")]
    documents = applicable_documents(local_number)
    return [ContractLink(id=doc.id, name=doc.short_name) for doc in documents.all]


def build_user_context(local_number: Optional[int], classification: Optional[str]) -> UserContext:
    position = parse_classification(classification)
    links = contract_links(local_number)

    local = get_local_by_number(local_number) if local_number else None
    local_name = f"Teamsters Local {local.number}" if local else None

    lines = [f"**Position:** {position}"]
    if local_name:
        lines.append(f"**Local:** {local_name}")
    lines.append("**Applicable Contracts:** " + " → ".join(link.marker for link in links))

    return UserContext(
        position=position,
        local_number=local_number,
        local_name=local_name,
        contract_chain=[link.name for link in links],
        formatted="\n".join(lines),
    )

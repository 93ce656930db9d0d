"""Union reference data models: Locals, contract documents and chains."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, computed_field

Region = Literal["western", "central", "eastern", "atlantic", "southern"]

DocumentType = Literal["master", "supplement", "rider", "local", "mou"]

REGIONS: tuple[Region, ...] = ("western", "central", "eastern", "atlantic", "southern")


class Local(BaseModel):
    """A Teamster Local union chapter."""

    model_config = ConfigDict(frozen=True)

    number: int
    name: str
    city: str
    state: str
    region: Region


class LocalSearchResult(Local):
    """Local with a display label and search score."""

    display_name: str
    match_score: int


class ContractDocument(BaseModel):
    """A contract document: master agreement, supplement, rider or local agreement."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    short_name: str
    type: DocumentType
    description: Optional[str] = None


class SupplementChain(BaseModel):
    """Documents that apply to one Local, excluding the implicit master agreement."""

    model_config = ConfigDict(frozen=True)

    region: Region
    supplements: tuple[str, ...]
    riders: tuple[str, ...] = ()


class ApplicableDocuments(BaseModel):
    """Resolved chain with full document records, master first."""

    master: ContractDocument
    supplements: List[ContractDocument]
    riders: List[ContractDocument]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all(self) -> List[ContractDocument]:
        return [self.master, *self.supplements, *self.riders]


class Classification(BaseModel):
    """Job classification shown during onboarding."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: str

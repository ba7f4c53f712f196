"""
Data Models
===========
Pydantic models for structured import output.
All models are serializable to JSON for the calling endpoint.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


# ─── Enums ────────────────────────────────────────────────────────────────────


class Classification(str, Enum):
    """Content tier of a section, derived from its level-2 heading."""
    K1 = "k1"
    K2 = "k2"
    K3 = "k3"
    SOURCES = "sources"


# ─── Section Models ───────────────────────────────────────────────────────────


class Section(BaseModel):
    """
    One emitted content unit.
    `topic` is informational; the output title is always `title`.
    """
    topic: str
    classification: Classification
    title: str
    markup: str = Field(description="HTML converted from the raw lines")


def _empty_groups() -> dict[Classification, list[Section]]:
    return {c: [] for c in Classification}


class ParseStats(BaseModel):
    """Per-classification section counts plus a total."""
    total: int = 0
    k1: int = 0
    k2: int = 0
    k3: int = 0
    sources: int = 0

    def count(self, classification: Classification) -> int:
        return getattr(self, classification.value)


class ParseResult(BaseModel):
    """
    Complete output of a parse run.
    This is the top-level JSON structure returned to the endpoint.
    """
    sections: list[Section] = Field(default_factory=list)
    grouped: dict[Classification, list[Section]] = Field(
        default_factory=_empty_groups
    )
    stats: ParseStats = Field(default_factory=ParseStats)

    def to_json_dict(self) -> dict:
        """Plain dict with string enum keys, ready for json.dumps."""
        return self.model_dump(mode="json")


# ─── Catalog / Suggestion Models ─────────────────────────────────────────────


class CatalogEntry(BaseModel):
    """An existing stored block, supplied by the persistence layer."""
    identifier: str
    label: str = ""

    @computed_field
    @property
    def search_text(self) -> str:
        """Lower-cased label and identifier used for keyword scans."""
        return f"{self.label} {self.identifier}".lower()


class StyleOption(BaseModel):
    """A catalog entry as a selectable style option."""
    value: str
    label: str


class SuggestionSet(BaseModel):
    """Best-guess style identifier per classification, or None."""
    k1: Optional[str] = None
    k2: Optional[str] = None
    k3: Optional[str] = None
    sources: Optional[str] = None

    def get(self, classification: Classification) -> Optional[str]:
        return getattr(self, classification.value)

    def as_mapping(self) -> dict[Classification, Optional[str]]:
        return {c: self.get(c) for c in Classification}


class StyleMappingReport(BaseModel):
    """Style options together with the suggested mapping."""
    styles: list[StyleOption] = Field(default_factory=list)
    suggestions: SuggestionSet = Field(default_factory=SuggestionSet)


# ─── Import Plan Models ──────────────────────────────────────────────────────


class PlannedBlock(BaseModel):
    """A section bound to the style identifier it will be stored under."""
    style: str
    title: str
    classification: Classification
    topic: str
    markup: str

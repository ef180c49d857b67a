"""Pydantic models for gallery records and override rules.

Raw records come straight from the GitHub listing; enriched records are what
the catalog stores and the renderer displays.
"""
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


# -------------------- Records --------------------


class RawRecord(BaseModel):
    """Repository metadata as retrieved, before enrichment."""

    id: str  # full_name: "owner/repo"
    name: str
    description: Optional[str] = None
    topics: list[str] = Field(default_factory=list)
    language: Optional[str] = None
    fork: bool = False
    default_branch: str = "main"
    html_url: str = ""
    readme: Optional[str] = None  # fetched separately, None if missing or failed


class EnrichedRecord(BaseModel):
    """Display-ready project card. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    description: str
    tags: tuple[str, ...]  # badges, display order matters
    image_url: Optional[str] = None
    source_url: str = ""
    categories: tuple[str, ...]  # filter keys


# -------------------- Override Rules --------------------


class FieldPatch(BaseModel):
    """Partial update for an enriched record; None means "not provided"."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None
    categories: Optional[tuple[str, ...]] = None
    image_url: Optional[str] = None

    def provided(self) -> dict[str, Any]:
        return {k: v for k, v in self.model_dump().items() if v is not None}


class OverrideRule(BaseModel):
    """Name-pattern rule for one known project family.

    `always` fields are written whenever the rule matches; `fill` fields are
    written only if the record does not already have a value for them.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    matches: Callable[[str], bool]  # receives the lowercased repo name
    always: FieldPatch = Field(default_factory=FieldPatch)
    fill: FieldPatch = Field(default_factory=FieldPatch)

"""Pydantic schemas for scoring engine outputs.

All outputs are plain data: no methods beyond serialization and no hidden
state. Attributes are snake_case; ``model_dump(by_alias=True)`` produces
the camelCase keys consumed by the review UI and export layer.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ics_review.schemas.enums import IssueSeverity, QualificationStatus


class EngineResult(BaseModel):
    """Base for engine outputs: immutable, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class GroupScore(EngineResult):
    """Score of a single category with its cap applied."""

    group_id: str = Field(description="Category id (e.g., 'proofOfExperience')")
    group_title: str = Field(description="Category title (e.g., 'Proof-of-Experience')")
    raw_score: int = Field(description="Unclamped sum of the category's item values")
    capped_score: int = Field(description="min(raw_score, max_limit)")
    max_limit: int = Field(description="Category ceiling")
    min_limit: int = Field(description="Category floor required for full qualification")

    @property
    def exceeds_limit(self) -> bool:
        """True when the raw sum was cut down by the category cap."""
        return self.raw_score > self.max_limit


class ScoreBreakdown(EngineResult):
    """Per-category scores folded into a total and a qualification verdict."""

    groups: list[GroupScore] = Field(default_factory=list, description="One entry per category, catalog order")
    total_score: int = Field(description="Sum of capped category scores")
    is_qualified: bool
    is_partially_qualified: bool = Field(description="Total threshold met but a category floor is not")
    has_minimum_category_requirements: bool
    threshold: int = Field(description="Total score required to qualify")


class ScoreStatus(EngineResult):
    """Human-readable summary of a breakdown's qualification state."""

    status: QualificationStatus
    message: str
    color: str = Field(description="UI color: green, yellow or red")


class RejectionSuggestion(EngineResult):
    """Suggested free-text reason for rejecting an application."""

    id: str = Field(description="Stable id used by the UI for click-to-apply")
    text: str = Field(description="Reason text addressed to the applicant")
    description: str = Field(description="Short classification of the reason")


class CsmTestnetCheck(EngineResult):
    """Result of the CSM testnet / Circles consistency check."""

    is_valid: bool
    warning: Optional[str] = None
    severity: IssueSeverity = IssueSeverity.WARNING

"""Pydantic schemas and enums for ICS form review.

This module contains:
- ScoresRecord: validated sparse mapping of item id to points
- Engine outputs: GroupScore, ScoreBreakdown, ScoreStatus, RejectionSuggestion, CsmTestnetCheck
- Form models used by the export layer: IcsForm, IcsFormFilters
"""

from .enums import (
    IcsFormStatus,
    IssueSeverity,
    QualificationStatus,
    ScoreIssueKind,
    ScoreItemId,
)
from .forms import (
    IcsComments,
    IcsForm,
    IcsFormData,
    IcsFormFilters,
)
from .results import (
    CsmTestnetCheck,
    GroupScore,
    RejectionSuggestion,
    ScoreBreakdown,
    ScoreStatus,
)
from .scores import ScoresInput, ScoresRecord, as_score_mapping, score_value

__all__ = [
    # Enums
    "IcsFormStatus",
    "IssueSeverity",
    "QualificationStatus",
    "ScoreIssueKind",
    "ScoreItemId",
    # Scores
    "ScoresInput",
    "ScoresRecord",
    "as_score_mapping",
    "score_value",
    # Engine outputs
    "CsmTestnetCheck",
    "GroupScore",
    "RejectionSuggestion",
    "ScoreBreakdown",
    "ScoreStatus",
    # Forms
    "IcsComments",
    "IcsForm",
    "IcsFormData",
    "IcsFormFilters",
]

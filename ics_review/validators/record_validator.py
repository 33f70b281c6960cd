"""
Record Validator - validates a whole scores record before submission.

Applies every per-item gate across a record and classifies each problem:
- unknown_item_id: id not present in the catalog (error)
- out_of_range: negative, above max_points, or not an integer (error)
- illegal_discrete_value: in range but outside the item's legal set (error)
- cross_field_inconsistency: legal alone, inconsistent with another item (warning)

Errors block submission; warnings are advisory. Problems are returned as
data, never raised.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from ics_review.constants import CSM_TESTNET_ITEM_ID
from ics_review.schemas.enums import IssueSeverity, ScoreIssueKind, ScoreItemId
from ics_review.schemas.scores import ScoresInput, as_score_mapping, score_value
from ics_review.scorers.catalog import ScoreItem, ScoringCatalog
from ics_review.validators.consistency_validator import (
    get_csm_testnet_validation_error,
    get_csm_testnet_warning,
)
from ics_review.validators.item_validator import (
    is_integer_value,
    is_legal_score_value,
    range_error_message,
    validate_score_value,
)

logger = logging.getLogger(__name__)


@dataclass
class ScoreIssue:
    """A specific problem with one item of a scores record."""

    kind: ScoreIssueKind
    item_id: str
    value: Any
    severity: IssueSeverity
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind.value,
            "itemId": self.item_id,
            "value": self.value,
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass
class RecordValidationResult:
    """Result of validating a scores record."""

    is_valid: bool = True
    errors: list[ScoreIssue] = field(default_factory=list)
    warnings: list[ScoreIssue] = field(default_factory=list)

    def add_error(self, kind: ScoreIssueKind, item_id: str, value: Any, message: str) -> None:
        """Add a hard error (blocks the edit)."""
        self.errors.append(
            ScoreIssue(kind=kind, item_id=item_id, value=value, severity=IssueSeverity.ERROR, message=message)
        )
        self.is_valid = False

    def add_warning(self, kind: ScoreIssueKind, item_id: str, value: Any, message: str) -> None:
        """Add a soft warning (doesn't block the edit)."""
        self.warnings.append(
            ScoreIssue(kind=kind, item_id=item_id, value=value, severity=IssueSeverity.WARNING, message=message)
        )

    @property
    def issues(self) -> list[ScoreIssue]:
        return self.errors + self.warnings

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }


def _discrete_domain_message(item: ScoreItem, value: int) -> str:
    if item.id.value == CSM_TESTNET_ITEM_ID:
        message: Optional[str] = get_csm_testnet_validation_error(value)
        if message:
            return message
    allowed = ", ".join(str(v) for v in item.allowed_values())
    return f"{item.name} can only be {allowed} points"


def validate_scores_record(scores: ScoresInput, catalog: ScoringCatalog) -> RecordValidationResult:
    """
    Validate every item of a scores record.

    Args:
        scores: ScoresRecord or raw mapping of item id to points
        catalog: Scoring catalog

    Returns:
        RecordValidationResult with hard errors and advisory warnings
    """
    result = RecordValidationResult()
    mapping = as_score_mapping(scores)

    for item_id, value in mapping.items():
        if value is None:
            continue

        item = catalog.get_item(item_id)
        if item is None:
            result.add_error(ScoreIssueKind.UNKNOWN_ITEM_ID, str(item_id), value, f"Unknown score item: {item_id}")
            continue

        if not validate_score_value(item.id, value, catalog, item=item):
            result.add_error(ScoreIssueKind.OUT_OF_RANGE, item.id.value, value, range_error_message(item))
        elif not is_legal_score_value(item, value):
            result.add_error(
                ScoreIssueKind.ILLEGAL_DISCRETE_VALUE,
                item.id.value,
                value,
                _discrete_domain_message(item, value),
            )

    csm_value = score_value(mapping, ScoreItemId.CSM_TESTNET)
    circles_value = score_value(mapping, ScoreItemId.CIRCLES)
    if is_integer_value(csm_value) and is_integer_value(circles_value):
        # Values 1-3 are already reported above as illegal; only the soft Circles rules remain
        csm_check = get_csm_testnet_warning(csm_value, circles_value)
        if not csm_check.is_valid and csm_check.severity == IssueSeverity.WARNING:
            result.add_warning(
                ScoreIssueKind.CROSS_FIELD_INCONSISTENCY,
                ScoreItemId.CSM_TESTNET.value,
                csm_value,
                csm_check.warning or "",
            )

    logger.debug(
        f"Scores record validation: valid={result.is_valid}, "
        f"errors={len(result.errors)}, warnings={len(result.warnings)}"
    )
    return result

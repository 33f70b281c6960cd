"""
Score validators.

- item_validator: per-item range check and strict discrete-domain check
- consistency_validator: CSM testnet / Circles cross-field rules
- record_validator: whole-record validation with error/warning classification
"""

from ics_review.validators.consistency_validator import (
    check_csm_testnet,
    get_csm_testnet_validation_error,
    get_csm_testnet_warning,
)
from ics_review.validators.item_validator import (
    get_score_input_error,
    is_legal_score_value,
    validate_score_value,
)
from ics_review.validators.record_validator import (
    RecordValidationResult,
    ScoreIssue,
    validate_scores_record,
)

__all__ = [
    "check_csm_testnet",
    "get_csm_testnet_validation_error",
    "get_csm_testnet_warning",
    "get_score_input_error",
    "is_legal_score_value",
    "validate_score_value",
    "RecordValidationResult",
    "ScoreIssue",
    "validate_scores_record",
]

"""
Cross-field consistency for CSM testnet points.

CSM testnet awards 4 points for testnet participation and 5 when the
application also has Circles verification, so its legal value depends on
the ``circles`` item:
- 1, 2, 3 are never valid (error)
- 0 is always valid
- 5 without Circles points is inconsistent (warning)
- 4 with Circles points undersells the applicant (warning)

Results are returned as data; nothing here raises.
"""

from typing import Optional

from ics_review.constants import (
    CIRCLES_ITEM_ID,
    CSM_TESTNET_ITEM_ID,
    CSM_TESTNET_LEGAL_VALUES,
    CSM_TESTNET_MAX_POINTS,
)
from ics_review.schemas.enums import IssueSeverity
from ics_review.schemas.results import CsmTestnetCheck
from ics_review.schemas.scores import ScoresInput, as_score_mapping, score_value

CSM_TESTNET_DISCRETE_MESSAGE = "CSM testnet can only be 0, 4, or 5 points"
CSM_TESTNET_RANGE_MESSAGE = f"Value must be between 0 and {CSM_TESTNET_MAX_POINTS}"
CSM_TESTNET_WITHOUT_CIRCLES_MESSAGE = (
    "CSM testnet should be 4 when Circles = 0 (5 points only when Circles verification exists)"
)
CSM_TESTNET_WITH_CIRCLES_MESSAGE = (
    "CSM testnet should be 5 when Circles verification exists (current: 4, optimal: 5)"
)


def get_csm_testnet_validation_error(value: int) -> Optional[str]:
    """Get the blocking validation error for a CSM testnet value, if any."""
    if value < 0 or value > CSM_TESTNET_MAX_POINTS:
        return CSM_TESTNET_RANGE_MESSAGE
    if value not in CSM_TESTNET_LEGAL_VALUES:
        return CSM_TESTNET_DISCRETE_MESSAGE
    return None


def get_csm_testnet_warning(csm_testnet_value: int, circles_value: int) -> CsmTestnetCheck:
    """Check a CSM testnet value against the concurrently held Circles value."""
    if csm_testnet_value in (1, 2, 3):
        return CsmTestnetCheck(
            is_valid=False,
            warning=CSM_TESTNET_DISCRETE_MESSAGE,
            severity=IssueSeverity.ERROR,
        )

    if csm_testnet_value == 0:
        return CsmTestnetCheck(is_valid=True)

    if circles_value == 0 and csm_testnet_value == 5:
        return CsmTestnetCheck(is_valid=False, warning=CSM_TESTNET_WITHOUT_CIRCLES_MESSAGE)

    if circles_value > 0 and csm_testnet_value == 4:
        return CsmTestnetCheck(is_valid=False, warning=CSM_TESTNET_WITH_CIRCLES_MESSAGE)

    return CsmTestnetCheck(is_valid=True)


def check_csm_testnet(scores: ScoresInput) -> CsmTestnetCheck:
    """Run the CSM testnet check on a whole record (missing values count as 0)."""
    mapping = as_score_mapping(scores)
    return get_csm_testnet_warning(
        score_value(mapping, CSM_TESTNET_ITEM_ID),
        score_value(mapping, CIRCLES_ITEM_ID),
    )

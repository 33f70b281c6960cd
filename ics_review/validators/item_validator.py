"""
Per-item score validation.

Two gates with different strictness:
- ``validate_score_value``: hard bounds check (0..max_points). Used to block
  out-of-range input. Values inside the range always pass, including the
  1-3 points that CSM testnet never awards.
- ``is_legal_score_value``: bounds plus the item's discrete domain. Used
  wherever full domain correctness is required (whole-record validation).
"""

from typing import Optional, Union

from ics_review.constants import CSM_TESTNET_ITEM_ID
from ics_review.schemas.enums import ScoreItemId
from ics_review.scorers.catalog import ScoreItem, ScoringCatalog
from ics_review.validators.consistency_validator import get_csm_testnet_validation_error


def is_integer_value(value) -> bool:
    """True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_score_value(
    item_id: Union[ScoreItemId, str],
    value: int,
    catalog: Optional[ScoringCatalog],
    item: Optional[ScoreItem] = None,
) -> bool:
    """Validate that a score value is within the allowed range for an item.

    Args:
        item_id: Item being edited
        value: Proposed points
        catalog: Catalog used to resolve the item when not supplied
        item: Pre-resolved item (skips the catalog lookup)

    Returns:
        False for negative values, values above max_points, non-integers or
        unknown items; True otherwise
    """
    if not is_integer_value(value) or value < 0:
        return False

    if item is None and catalog is not None:
        item = catalog.get_item(item_id)
    if item is None:
        return False

    return value <= item.max_points


def is_legal_score_value(item: ScoreItem, value: int) -> bool:
    """Strict check: value is in range and in the item's discrete domain."""
    if not is_integer_value(value) or value < 0 or value > item.max_points:
        return False
    return item.legal_values is None or value in item.legal_values


def range_error_message(item: ScoreItem) -> str:
    return f"Value must be between 0 and {item.max_points}"


def get_score_input_error(item: ScoreItem, value: int) -> Optional[str]:
    """Blocking error text for a score input, None when the value is accepted."""
    if validate_score_value(item.id, value, catalog=None, item=item):
        return None
    if item.id.value == CSM_TESTNET_ITEM_ID and is_integer_value(value):
        return get_csm_testnet_validation_error(value) or range_error_message(item)
    return range_error_message(item)

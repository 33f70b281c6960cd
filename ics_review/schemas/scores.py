"""Scores record: the sparse per-item point awards of one ICS form.

The review API sends scores as a sparse camelCase mapping
(``{"ethStaker": 6, "circles": 3}``). Missing items count as 0.

``ScoresRecord`` is the validated boundary type: unknown item ids and
negative or non-integer values (including booleans and numeric strings)
are rejected with a ``ValidationError``.
Engine functions also accept a plain mapping so that callers holding raw
API payloads can query them directly.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import Field, RootModel, StrictInt

from ics_review.schemas.enums import ScoreItemId


# Strict: booleans, numeric strings and floats are rejected rather than coerced
ScorePoints = Annotated[StrictInt, Field(ge=0)]


class ScoresRecord(RootModel[dict[ScoreItemId, Optional[ScorePoints]]]):
    """Sparse mapping of item id to awarded points."""

    root: dict[ScoreItemId, Optional[ScorePoints]] = Field(default_factory=dict)

    def value(self, item_id: Union[ScoreItemId, str]) -> int:
        """Return the points for an item, 0 when absent or unknown."""
        key = ScoreItemId.lookup(item_id)
        if key is None:
            return 0
        return self.root.get(key) or 0

    def with_value(self, item_id: Union[ScoreItemId, str], value: int) -> "ScoresRecord":
        """Return a new record with one item changed (this one is left untouched)."""
        updated: dict[str, Any] = {key.value: points for key, points in self.root.items()}
        updated[ScoreItemId(item_id).value] = value
        return ScoresRecord.model_validate(updated)

    def to_dict(self) -> dict[str, int]:
        """Sparse camelCase mapping, skipping null entries."""
        return {key.value: points for key, points in self.root.items() if points is not None}


ScoresInput = Union[ScoresRecord, Mapping[Any, Any]]


def as_score_mapping(scores: Optional[ScoresInput]) -> dict[str, Any]:
    """Normalize a record or raw mapping to a dict keyed by item id strings.

    Enum keys are converted to their values; str-mixin enums hash by member
    name, so mixing them with plain string keys would break lookups.
    """
    if scores is None:
        return {}
    if isinstance(scores, ScoresRecord):
        return scores.to_dict()
    return {(key.value if isinstance(key, Enum) else key): value for key, value in scores.items()}


def score_value(mapping: Mapping[str, Any], item_id: Union[ScoreItemId, str]) -> int:
    """Read one item's points from a normalized mapping (missing or null → 0)."""
    key = item_id.value if isinstance(item_id, ScoreItemId) else item_id
    return mapping.get(key) or 0

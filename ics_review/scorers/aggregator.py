"""Category Aggregator - raw and capped category scores.

The aggregator is permissive: values are summed as given
(missing → 0) and only the category ceiling is applied, so the review UI
can show "raw: N (capped)" when a category overflows. Range checks belong
to the item validators.
"""

from ics_review.schemas.results import GroupScore
from ics_review.schemas.scores import ScoresInput, as_score_mapping, score_value
from ics_review.scorers.catalog import ScoreCategory, ScoringCatalog


def calculate_group_score(scores: ScoresInput, category: ScoreCategory) -> GroupScore:
    """Calculate the score for a single category with its max limit enforced."""
    mapping = as_score_mapping(scores)
    raw_score = sum(score_value(mapping, item.id) for item in category.items)

    return GroupScore(
        group_id=category.id,
        group_title=category.title,
        raw_score=raw_score,
        capped_score=min(raw_score, category.max),
        max_limit=category.max,
        min_limit=category.min,
    )


def calculate_group_scores(scores: ScoresInput, catalog: ScoringCatalog) -> list[GroupScore]:
    """Calculate every category's score, in catalog order."""
    mapping = as_score_mapping(scores)
    return [calculate_group_score(mapping, category) for category in catalog.categories]


def calculate_total_score(scores: ScoresInput, catalog: ScoringCatalog) -> int:
    """Calculate the total score with all category limits applied."""
    return sum(group.capped_score for group in calculate_group_scores(scores, catalog))

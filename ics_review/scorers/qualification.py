"""
Breakdown & Qualification - folds category scores into a verdict.

Qualification is two predicates recomputed on every call:
1. Total capped score meets the catalog threshold
2. Every category's capped score meets its floor

Both → qualified. Only (1) → partially qualified. Otherwise not qualified.
"""

import math

from ics_review.constants import CATEGORY_TITLE_PREFIX
from ics_review.schemas.enums import QualificationStatus
from ics_review.schemas.results import GroupScore, ScoreBreakdown, ScoreStatus
from ics_review.schemas.scores import ScoresInput
from ics_review.scorers.aggregator import calculate_group_scores
from ics_review.scorers.catalog import ScoringCatalog

STATUS_COLORS = {
    QualificationStatus.QUALIFIED: "green",
    QualificationStatus.PARTIALLY_QUALIFIED: "yellow",
    QualificationStatus.NOT_QUALIFIED: "red",
}


def has_minimum_category_requirements(groups: list[GroupScore]) -> bool:
    """Check if all categories meet their minimum requirements."""
    return all(group.capped_score >= group.min_limit for group in groups)


def meets_total_threshold(total_score: int, catalog: ScoringCatalog) -> bool:
    """Check if a total score reaches the qualification threshold."""
    return total_score >= catalog.threshold


def get_score_breakdown(scores: ScoresInput, catalog: ScoringCatalog) -> ScoreBreakdown:
    """Get the per-category breakdown and qualification verdict for a record."""
    groups = calculate_group_scores(scores, catalog)
    total_score = sum(group.capped_score for group in groups)
    has_min_reqs = has_minimum_category_requirements(groups)
    meets_total = meets_total_threshold(total_score, catalog)

    return ScoreBreakdown(
        groups=groups,
        total_score=total_score,
        is_qualified=meets_total and has_min_reqs,
        is_partially_qualified=meets_total and not has_min_reqs,
        has_minimum_category_requirements=has_min_reqs,
        threshold=catalog.threshold,
    )


def get_score_percentage(total_score: int, catalog: ScoringCatalog) -> int:
    """Percentage of the maximum reachable score, rounded half up."""
    max_possible = catalog.max_total_score
    if max_possible == 0:
        return 0
    return math.floor(total_score / max_possible * 100 + 0.5)


def short_category_name(title: str) -> str:
    """'Proof-of-Humanity' → 'Humanity'."""
    return title.replace(CATEGORY_TITLE_PREFIX, "", 1)


def failing_category_names(breakdown: ScoreBreakdown) -> list[str]:
    """Short names of categories whose capped score is below their floor."""
    return [short_category_name(group.group_title) for group in breakdown.groups if group.capped_score < group.min_limit]


def get_score_status(breakdown: ScoreBreakdown) -> ScoreStatus:
    """Get a status message for a score breakdown."""
    threshold = breakdown.threshold

    if breakdown.is_qualified:
        status = QualificationStatus.QUALIFIED
        message = (
            f"Qualified! Score exceeds the {threshold} point requirement "
            "and all categories meet minimum requirements"
        )
    elif breakdown.is_partially_qualified:
        status = QualificationStatus.PARTIALLY_QUALIFIED
        category_names = ", ".join(failing_category_names(breakdown))
        message = (
            "Partially qualified. Total score meets requirement "
            f"but these categories need improvement: {category_names}"
        )
    else:
        status = QualificationStatus.NOT_QUALIFIED
        points_needed = threshold - breakdown.total_score
        plural = "" if points_needed == 1 else "s"
        message = f"Not qualified. {points_needed} more point{plural} needed to reach {threshold}"

    return ScoreStatus(status=status, message=message, color=STATUS_COLORS[status])

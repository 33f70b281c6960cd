"""Rejection rationale - suggested reasons for rejecting an application.

Suggestions are derived from the score breakdown and offered to the
reviewer as click-to-apply rejection reasons. Qualified applications get
none.
"""

from ics_review.schemas.results import RejectionSuggestion
from ics_review.schemas.scores import ScoresInput
from ics_review.scorers.catalog import ScoringCatalog
from ics_review.scorers.qualification import failing_category_names, get_score_breakdown

INSUFFICIENT_TOTAL_ID = "insufficient-total"
CATEGORY_MINIMUMS_ID = "category-minimums"
GENERAL_REJECTION_ID = "general-rejection"


def generate_rejection_suggestions(scores: ScoresInput, catalog: ScoringCatalog) -> list[RejectionSuggestion]:
    """Generate contextual rejection reasons based on scoring.

    Order is stable: total-score shortfall first, then unmet category
    minimums, else a generic fallback.
    """
    breakdown = get_score_breakdown(scores, catalog)
    if breakdown.is_qualified:
        return []

    suggestions: list[RejectionSuggestion] = []

    if breakdown.total_score < breakdown.threshold:
        suggestions.append(
            RejectionSuggestion(
                id=INSUFFICIENT_TOTAL_ID,
                text=(
                    f"Your application earned {breakdown.total_score} out of "
                    f"{breakdown.threshold} points required to qualify."
                ),
                description="Total score below requirement",
            )
        )

    if not breakdown.has_minimum_category_requirements:
        failing = ", ".join(failing_category_names(breakdown))
        suggestions.append(
            RejectionSuggestion(
                id=CATEGORY_MINIMUMS_ID,
                text=f"Your application did not reach the minimum score required for some categories ({failing}).",
                description="Category minimum requirements not met",
            )
        )

    # Catch-all: the two checks above cover every non-qualified breakdown today
    if not suggestions:
        suggestions.append(
            RejectionSuggestion(
                id=GENERAL_REJECTION_ID,
                text="Your application does not meet the current qualification criteria.",
                description="General rejection reason",
            )
        )

    return suggestions

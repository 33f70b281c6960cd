"""Scoring, validation and export for ICS (Independent Community Staker) form review.

Usage:
    from ics_review import load_catalog, get_score_breakdown, get_score_status

    catalog = load_catalog()
    breakdown = get_score_breakdown({"ethStaker": 6, "circles": 5, "aragonVotes": 2}, catalog)
    get_score_status(breakdown).message
"""

from ics_review.scorers import (
    CatalogError,
    ScoringCatalog,
    calculate_total_score,
    generate_rejection_suggestions,
    get_score_breakdown,
    get_score_status,
    load_catalog,
)
from ics_review.schemas import ScoresRecord
from ics_review.validators import validate_scores_record

__version__ = "0.1.0"

__all__ = [
    "CatalogError",
    "ScoringCatalog",
    "ScoresRecord",
    "calculate_total_score",
    "generate_rejection_suggestions",
    "get_score_breakdown",
    "get_score_status",
    "load_catalog",
    "validate_scores_record",
]

"""Deterministic scoring modules for ICS form review."""

from ics_review.scorers.aggregator import (
    calculate_group_score,
    calculate_group_scores,
    calculate_total_score,
)
from ics_review.scorers.catalog import (
    CatalogError,
    ScoreCategory,
    ScoreItem,
    ScoringCatalog,
    catalog_from_dict,
    load_catalog,
)
from ics_review.scorers.qualification import (
    failing_category_names,
    get_score_breakdown,
    get_score_percentage,
    get_score_status,
    has_minimum_category_requirements,
    meets_total_threshold,
)
from ics_review.scorers.rejection import generate_rejection_suggestions

__all__ = [
    # Catalog
    "CatalogError",
    "ScoreCategory",
    "ScoreItem",
    "ScoringCatalog",
    "catalog_from_dict",
    "load_catalog",
    # Aggregation
    "calculate_group_score",
    "calculate_group_scores",
    "calculate_total_score",
    # Qualification
    "failing_category_names",
    "get_score_breakdown",
    "get_score_percentage",
    "get_score_status",
    "has_minimum_category_requirements",
    "meets_total_threshold",
    # Rejection rationale
    "generate_rejection_suggestions",
]

"""Tests for score breakdown, qualification verdicts and status messages."""

import pytest

from ics_review.schemas.enums import QualificationStatus
from ics_review.scorers.catalog import catalog_from_dict
from ics_review.scorers.qualification import (
    failing_category_names,
    get_score_breakdown,
    get_score_percentage,
    get_score_status,
    has_minimum_category_requirements,
    meets_total_threshold,
    short_category_name,
)

# ─── Scenarios ────────────────────────────────────────────────────────────────


class TestBreakdownScenarios:
    """End-to-end breakdowns for representative applications."""

    def test_all_zero(self, catalog):
        breakdown = get_score_breakdown({}, catalog)
        assert breakdown.total_score == 0
        assert not breakdown.is_qualified
        assert not breakdown.is_partially_qualified
        assert not breakdown.has_minimum_category_requirements
        assert "15 more points needed" in get_score_status(breakdown).message

    def test_minimums_met_but_total_short(self, catalog):
        """Raw 10/4/2 → capped 8/4/2 = 14 < 15."""
        scores = {"ethStaker": 6, "obolTechne": 4, "circles": 4, "aragonVotes": 2}
        breakdown = get_score_breakdown(scores, catalog)
        assert [g.capped_score for g in breakdown.groups] == [8, 4, 2]
        assert breakdown.total_score == 14
        assert breakdown.has_minimum_category_requirements
        assert not breakdown.is_qualified
        assert not breakdown.is_partially_qualified

    def test_qualified(self, catalog):
        """Raw 10/4/3 → capped 8/4/3 = 15."""
        scores = {"ethStaker": 6, "obolTechne": 4, "circles": 4, "aragonVotes": 2, "snapshotVotes": 1}
        breakdown = get_score_breakdown(scores, catalog)
        assert breakdown.total_score == 15
        assert breakdown.is_qualified
        assert not breakdown.is_partially_qualified

    def test_partially_qualified(self, catalog, partially_qualified_scores):
        breakdown = get_score_breakdown(partially_qualified_scores, catalog)
        assert [g.capped_score for g in breakdown.groups] == [8, 0, 7]
        assert breakdown.total_score == 15
        assert not breakdown.has_minimum_category_requirements
        assert breakdown.is_partially_qualified
        assert not breakdown.is_qualified

    def test_threshold_carried(self, catalog):
        assert get_score_breakdown({}, catalog).threshold == 15

    def test_camel_case_serialization(self, catalog, qualified_scores):
        data = get_score_breakdown(qualified_scores, catalog).model_dump(by_alias=True)
        assert data["totalScore"] == 15
        assert data["isQualified"] is True
        assert data["groups"][0]["cappedScore"] == 8
        assert data["groups"][0]["groupTitle"] == "Proof-of-Experience"


# ─── Properties ───────────────────────────────────────────────────────────────


class TestBreakdownProperties:
    """Relationships that hold for any record."""

    @pytest.mark.parametrize(
        "scores",
        [
            {},
            {"ethStaker": 6},
            {"ethStaker": 6, "stakeCat": 6, "ssvVerified": 7},
            {"humanPassport": 8, "circles": 8, "discord": 2, "twitter": 1},
            {"ethStaker": 6, "csmMainnet": 2, "lidoGalxe": 5, "gitPoaps": 2},
            {"ethStaker": 6, "obolTechne": 4, "circles": 4, "aragonVotes": 2, "snapshotVotes": 1},
        ],
    )
    def test_invariants(self, catalog, scores):
        breakdown = get_score_breakdown(scores, catalog)
        assert breakdown.total_score == sum(g.capped_score for g in breakdown.groups)
        assert not (breakdown.is_qualified and breakdown.is_partially_qualified)
        for group in breakdown.groups:
            assert 0 <= group.capped_score <= group.max_limit
            assert group.capped_score == min(group.raw_score, group.max_limit)
        assert breakdown.is_qualified == (
            breakdown.total_score >= breakdown.threshold and breakdown.has_minimum_category_requirements
        )

    def test_deterministic(self, catalog, qualified_scores):
        assert get_score_breakdown(qualified_scores, catalog) == get_score_breakdown(qualified_scores, catalog)

    def test_custom_threshold(self, minimal_catalog_data):
        """Qualification is relative to the catalog's threshold."""
        minimal_catalog_data["total_score_required"] = 11
        catalog = catalog_from_dict(minimal_catalog_data)
        breakdown = get_score_breakdown({"ethStaker": 5, "circles": 4, "aragonVotes": 2}, catalog)
        assert breakdown.total_score == 11
        assert breakdown.is_qualified


class TestPredicates:
    """Helpers behind the verdict."""

    def test_has_minimum_category_requirements(self, catalog, qualified_scores, partially_qualified_scores):
        assert has_minimum_category_requirements(get_score_breakdown(qualified_scores, catalog).groups)
        assert not has_minimum_category_requirements(get_score_breakdown(partially_qualified_scores, catalog).groups)

    def test_empty_groups_meet_minimums(self):
        assert has_minimum_category_requirements([])

    def test_meets_total_threshold(self, catalog):
        assert meets_total_threshold(15, catalog)
        assert meets_total_threshold(23, catalog)
        assert not meets_total_threshold(14, catalog)


# ─── Status messages ──────────────────────────────────────────────────────────


class TestScoreStatus:
    """Human-readable status for each verdict."""

    def test_qualified(self, catalog, qualified_scores):
        status = get_score_status(get_score_breakdown(qualified_scores, catalog))
        assert status.status == QualificationStatus.QUALIFIED
        assert status.color == "green"
        assert status.message == (
            "Qualified! Score exceeds the 15 point requirement and all categories meet minimum requirements"
        )

    def test_partially_qualified_names_failing_categories(self, catalog, partially_qualified_scores):
        status = get_score_status(get_score_breakdown(partially_qualified_scores, catalog))
        assert status.status == QualificationStatus.PARTIALLY_QUALIFIED
        assert status.color == "yellow"
        assert status.message == (
            "Partially qualified. Total score meets requirement but these categories need improvement: Humanity"
        )

    def test_not_qualified(self, catalog):
        status = get_score_status(get_score_breakdown({"ethStaker": 6, "circles": 4}, catalog))
        assert status.status == QualificationStatus.NOT_QUALIFIED
        assert status.color == "red"
        assert status.message == "Not qualified. 5 more points needed to reach 15"

    def test_not_qualified_singular(self, catalog):
        scores = {"ethStaker": 6, "obolTechne": 4, "circles": 4, "aragonVotes": 2}
        status = get_score_status(get_score_breakdown(scores, catalog))
        assert status.message == "Not qualified. 1 more point needed to reach 15"

    def test_serialized_status_value(self, catalog):
        data = get_score_status(get_score_breakdown({}, catalog)).model_dump(by_alias=True, mode="json")
        assert data["status"] == "not-qualified"


class TestCategoryNames:
    """Short category names used in messages."""

    def test_short_category_name(self):
        assert short_category_name("Proof-of-Humanity") == "Humanity"

    def test_short_category_name_without_prefix(self):
        assert short_category_name("Engagement") == "Engagement"

    def test_failing_category_names(self, catalog):
        breakdown = get_score_breakdown({"humanPassport": 8, "aragonVotes": 2}, catalog)
        assert failing_category_names(breakdown) == ["Experience"]

    def test_several_failing_in_catalog_order(self, catalog):
        assert failing_category_names(get_score_breakdown({}, catalog)) == ["Experience", "Humanity", "Engagement"]


class TestScorePercentage:
    """Percentage of the maximum reachable total."""

    def test_zero(self, catalog):
        assert get_score_percentage(0, catalog) == 0

    def test_full(self, catalog):
        assert get_score_percentage(23, catalog) == 100

    def test_rounds(self, catalog):
        """15 / 23 = 65.2% → 65."""
        assert get_score_percentage(15, catalog) == 65

    def test_rounds_half_up(self, minimal_catalog_data):
        """A single category capped at 8: 1 of 8 is 12.5% → 13."""
        minimal_catalog_data["categories"] = [
            {**minimal_catalog_data["categories"][0], "min": 0, "max": 8},
            {**minimal_catalog_data["categories"][1], "min": 0, "max": 0},
            {**minimal_catalog_data["categories"][2], "min": 0, "max": 0},
        ]
        catalog = catalog_from_dict(minimal_catalog_data)
        assert catalog.max_total_score == 8
        assert get_score_percentage(1, catalog) == 13

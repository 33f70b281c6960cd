"""Shared fixtures for ICS review tests.

The bundled catalog is the real configuration shipped with the package;
tests that need odd shapes build their own with ``catalog_from_dict``.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to path so tests can import ics_review without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from ics_review.config import BUNDLED_CATALOG_PATH  # noqa: E402
from ics_review.scorers.catalog import load_catalog  # noqa: E402


@pytest.fixture(scope="session")
def catalog():
    """The bundled scoring catalog (threshold 15, three categories)."""
    return load_catalog(BUNDLED_CATALOG_PATH)


@pytest.fixture
def qualified_scores():
    """Experience 8 (capped from 12), Humanity 4, Engagement 3 → total 15."""
    return {"ethStaker": 6, "stakeCat": 6, "circles": 4, "aragonVotes": 2, "snapshotVotes": 1}


@pytest.fixture
def partially_qualified_scores():
    """Experience 8, Humanity 0 (below min 4), Engagement 7 → total 15."""
    return {"ethStaker": 6, "csmMainnet": 2, "lidoGalxe": 5, "gitPoaps": 2}


@pytest.fixture
def minimal_catalog_data():
    """Plain catalog data covering every item id, for tests that tweak the shape."""
    return {
        "version": "test",
        "total_score_required": 15,
        "categories": [
            {
                "id": "proofOfExperience",
                "title": "Proof-of-Experience",
                "min": 5,
                "max": 8,
                "items": [
                    {"id": "ethStaker", "name": "EthStaker", "max_points": 6},
                    {"id": "stakeCat", "name": "StakeCat", "max_points": 6},
                    {"id": "obolTechne", "name": "Obol Techne", "max_points": 6},
                    {"id": "ssvVerified", "name": "SSV Verified", "max_points": 7},
                    {"id": "csmTestnet", "name": "CSM testnet", "max_points": 5, "legal_values": [0, 4, 5]},
                    {"id": "csmMainnet", "name": "CSM mainnet", "max_points": 6},
                    {"id": "sdvtTestnet", "name": "SDVT testnet", "max_points": 5},
                    {"id": "sdvtMainnet", "name": "SDVT mainnet", "max_points": 7},
                ],
            },
            {
                "id": "proofOfHumanity",
                "title": "Proof-of-Humanity",
                "min": 4,
                "max": 8,
                "items": [
                    {"id": "humanPassport", "name": "Human passport", "max_points": 8},
                    {"id": "circles", "name": "Circles", "max_points": 8},
                    {"id": "discord", "name": "Discord", "max_points": 2},
                    {"id": "twitter", "name": "X", "max_points": 1},
                ],
            },
            {
                "id": "proofOfEngagement",
                "title": "Proof-of-Engagement",
                "min": 2,
                "max": 7,
                "items": [
                    {"id": "aragonVotes", "name": "Aragon", "max_points": 2},
                    {"id": "snapshotVotes", "name": "Snapshot", "max_points": 1},
                    {"id": "lidoGalxe", "name": "Galxe", "max_points": 5},
                    {"id": "highSignal", "name": "High Signal", "max_points": 5},
                    {"id": "gitPoaps", "name": "GitPOAPs", "max_points": 2},
                ],
            },
        ],
    }

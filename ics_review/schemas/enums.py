"""Enums shared by the scoring engine, validators and forms.

Item ids are the camelCase keys used by the review API, so the enum values
must stay byte-identical to the wire format.
"""

from enum import Enum


class ScoreItemId(str, Enum):
    """Closed set of scoring criteria, grouped by category."""

    # Proof-of-Experience
    ETH_STAKER = "ethStaker"
    STAKE_CAT = "stakeCat"
    OBOL_TECHNE = "obolTechne"
    SSV_VERIFIED = "ssvVerified"
    CSM_TESTNET = "csmTestnet"
    CSM_MAINNET = "csmMainnet"
    SDVT_TESTNET = "sdvtTestnet"
    SDVT_MAINNET = "sdvtMainnet"
    # Proof-of-Humanity
    HUMAN_PASSPORT = "humanPassport"
    CIRCLES = "circles"
    DISCORD = "discord"
    TWITTER = "twitter"
    # Proof-of-Engagement
    ARAGON_VOTES = "aragonVotes"
    SNAPSHOT_VOTES = "snapshotVotes"
    LIDO_GALXE = "lidoGalxe"
    HIGH_SIGNAL = "highSignal"
    GIT_POAPS = "gitPoaps"

    @classmethod
    def lookup(cls, item_id) -> "ScoreItemId | None":
        """Resolve an enum member or raw string id; None when unknown."""
        if isinstance(item_id, cls):
            return item_id
        try:
            return cls(item_id)
        except ValueError:
            return None


class QualificationStatus(str, Enum):
    """Overall verdict derived from a score breakdown."""

    QUALIFIED = "qualified"
    PARTIALLY_QUALIFIED = "partially-qualified"
    NOT_QUALIFIED = "not-qualified"


class IssueSeverity(str, Enum):
    """How a validation issue affects an edit."""

    ERROR = "error"  # Blocks the edit
    WARNING = "warning"  # Advisory only


class ScoreIssueKind(str, Enum):
    """Classification of problems found in a scores record."""

    OUT_OF_RANGE = "out_of_range"
    ILLEGAL_DISCRETE_VALUE = "illegal_discrete_value"
    CROSS_FIELD_INCONSISTENCY = "cross_field_inconsistency"
    UNKNOWN_ITEM_ID = "unknown_item_id"


class IcsFormStatus(str, Enum):
    """Review status of an ICS form."""

    REVIEW = "REVIEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

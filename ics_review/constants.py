"""
Global constants for ICS form review.

Centralizes the fixed numbers and strings shared by the scoring engine,
the validators and the export layer.
"""

# Qualification
DEFAULT_TOTAL_SCORE_REQUIRED = 15  # Total capped score needed to qualify
CATEGORY_TITLE_PREFIX = "Proof-of-"  # Stripped when naming categories in messages

# Item ids with special handling
CSM_TESTNET_ITEM_ID = "csmTestnet"
CIRCLES_ITEM_ID = "circles"

# CSM testnet: 4 points for testnet participation, 5 with Circles verification
CSM_TESTNET_LEGAL_VALUES = (0, 4, 5)
CSM_TESTNET_MAX_POINTS = 5

# Export
CSV_FILENAME_PREFIX = "ics-forms"
CSV_LIST_SEPARATOR = ", "
ADDRESS_FILTER_PREFIX_LENGTH = 6  # Characters of the address filter kept in filenames

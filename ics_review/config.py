"""
Central configuration for file locations.

The scoring catalog ships with the package. Deployments can point at their
own copy through environment variables:
  - ICS_SCORE_CATALOG (default: bundled ics_review/data/score_catalog.yaml)
  - ICS_REVIEW_LOG_DIR (default: ./logs)
"""

import os
from pathlib import Path

BUNDLED_CATALOG_PATH = Path(__file__).parent / "data" / "score_catalog.yaml"


def get_catalog_path() -> Path:
    """
    Get the path of the scoring catalog file.

    Uses ICS_SCORE_CATALOG environment variable if set, otherwise the
    catalog bundled with the package.

    Returns:
        Path to the catalog file (YAML or JSON)
    """
    env_path = os.environ.get("ICS_SCORE_CATALOG")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return BUNDLED_CATALOG_PATH


def get_log_dir() -> Path:
    """Get the directory for log files."""
    env_path = os.environ.get("ICS_REVIEW_LOG_DIR")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return Path.cwd() / "logs"

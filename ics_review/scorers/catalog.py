"""Score Catalog: categories, their items and per-item point domains.

The catalog is static configuration (YAML or JSON) describing the three
proof categories, their floors and ceilings, and the maximum points of
each item. It is loaded once at startup into an immutable
``ScoringCatalog`` which is then passed into every engine call.

Usage:
    from ics_review.scorers.catalog import load_catalog

    catalog = load_catalog()
    catalog.get_item("csmTestnet").legal_values        # (0, 4, 5)
    catalog.get_category_for_item("circles").title     # "Proof-of-Humanity"
    catalog.max_total_score                            # 23
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import yaml

from ics_review.config import BUNDLED_CATALOG_PATH, get_catalog_path
from ics_review.constants import DEFAULT_TOTAL_SCORE_REQUIRED
from ics_review.schemas.enums import ScoreItemId

logger = logging.getLogger(__name__)

EXPECTED_ITEM_IDS = frozenset(ScoreItemId)


class CatalogError(ValueError):
    """Raised when catalog configuration is malformed."""


@dataclass(frozen=True)
class ScoreItem:
    """A single scoring criterion."""

    id: ScoreItemId
    name: str
    max_points: int
    points_label: str = ""
    description: str = ""
    legal_values: Optional[tuple[int, ...]] = None  # None: every integer in 0..max_points

    def allowed_values(self) -> tuple[int, ...]:
        """Every value a reviewer may award for this item."""
        if self.legal_values is not None:
            return self.legal_values
        return tuple(range(self.max_points + 1))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id.value,
            "name": self.name,
            "points": self.points_label,
            "max_points": self.max_points,
            "description": self.description,
        }
        if self.legal_values is not None:
            data["legal_values"] = list(self.legal_values)
        return data


@dataclass(frozen=True)
class ScoreCategory:
    """A group of items sharing a floor (min) and a ceiling (max)."""

    id: str
    title: str
    min: int
    max: int
    items: tuple[ScoreItem, ...] = ()
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "min": self.min,
            "max": self.max,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class ScoringCatalog:
    """Immutable scoring configuration with precomputed item lookups.

    Attributes:
        categories: Categories in display/evaluation order
        threshold: Total capped score required to qualify
        version: Catalog version string from the configuration file
    """

    categories: tuple[ScoreCategory, ...]
    threshold: int = DEFAULT_TOTAL_SCORE_REQUIRED
    version: str = ""
    _items_by_id: Mapping[ScoreItemId, ScoreItem] = field(init=False, repr=False, compare=False)
    _category_by_item: Mapping[ScoreItemId, ScoreCategory] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        items_by_id: dict[ScoreItemId, ScoreItem] = {}
        category_by_item: dict[ScoreItemId, ScoreCategory] = {}
        for category in self.categories:
            for item in category.items:
                items_by_id[item.id] = item
                category_by_item[item.id] = category
        object.__setattr__(self, "_items_by_id", MappingProxyType(items_by_id))
        object.__setattr__(self, "_category_by_item", MappingProxyType(category_by_item))

    def get_item(self, item_id: Union[ScoreItemId, str]) -> Optional[ScoreItem]:
        """Look up an item by id; None for ids not in the catalog."""
        key = ScoreItemId.lookup(item_id)
        if key is None:
            return None
        return self._items_by_id.get(key)

    def get_category_for_item(self, item_id: Union[ScoreItemId, str]) -> Optional[ScoreCategory]:
        """Look up the category an item belongs to; None for unknown ids."""
        key = ScoreItemId.lookup(item_id)
        if key is None:
            return None
        return self._category_by_item.get(key)

    @property
    def items(self) -> tuple[ScoreItem, ...]:
        """All items in catalog order."""
        return tuple(item for category in self.categories for item in category.items)

    @property
    def item_ids(self) -> tuple[ScoreItemId, ...]:
        return tuple(item.id for item in self.items)

    @property
    def max_total_score(self) -> int:
        """Highest reachable total: the sum of category ceilings."""
        return sum(category.max for category in self.categories)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation, loadable by ``catalog_from_dict``."""
        return {
            "version": self.version,
            "total_score_required": self.threshold,
            "categories": [category.to_dict() for category in self.categories],
        }


def _is_count(value: Any) -> bool:
    """True for non-negative ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _require_list(value: Any, what: str) -> list[Any]:
    if not isinstance(value, list):
        raise CatalogError(f"{what} must be a list, got {type(value).__name__}")
    return value


def _build_item(raw: dict[str, Any]) -> ScoreItem:
    if not isinstance(raw, dict):
        raise CatalogError(f"Score item must be a mapping, got {raw!r}")

    item_id = ScoreItemId.lookup(raw.get("id"))
    if item_id is None:
        raise CatalogError(f"Unknown score item id: {raw.get('id')!r}")

    max_points = raw.get("max_points")
    if not _is_count(max_points):
        raise CatalogError(f"Item {item_id.value} has invalid max_points: {max_points!r}")

    legal_values = raw.get("legal_values")
    if legal_values is not None:
        values = _require_list(legal_values, f"Item {item_id.value} legal_values")
        if any(not _is_count(v) or v > max_points for v in values):
            raise CatalogError(f"Item {item_id.value} legal_values {values!r} must lie within 0..{max_points}")
        legal_values = tuple(sorted(set(values)))

    return ScoreItem(
        id=item_id,
        name=raw.get("name", item_id.value),
        max_points=max_points,
        points_label=str(raw.get("points", max_points)),
        description=raw.get("description", ""),
        legal_values=legal_values,
    )


def _build_category(raw: dict[str, Any]) -> ScoreCategory:
    if not isinstance(raw, dict):
        raise CatalogError(f"Category must be a mapping, got {raw!r}")

    category_id = raw.get("id")
    if not category_id or not isinstance(category_id, str):
        raise CatalogError("Category is missing an id")

    lower, upper = raw.get("min"), raw.get("max")
    if not _is_count(lower) or not _is_count(upper):
        raise CatalogError(f"Category {category_id} needs non-negative integer min and max")
    if lower > upper:
        raise CatalogError(f"Category {category_id} has invalid bounds: min={lower}, max={upper}")

    items = _require_list(raw.get("items", []), f"Category {category_id} items")
    return ScoreCategory(
        id=category_id,
        title=raw.get("title", category_id),
        description=raw.get("description", ""),
        min=lower,
        max=upper,
        items=tuple(_build_item(item) for item in items),
    )


def _validate_item_ids(categories: tuple[ScoreCategory, ...]) -> None:
    """Validate that the catalog covers every known item exactly once."""
    seen: set[ScoreItemId] = set()
    for category in categories:
        for item in category.items:
            if item.id in seen:
                raise CatalogError(f"Score item {item.id.value} appears more than once")
            seen.add(item.id)

    missing = EXPECTED_ITEM_IDS - seen
    if missing:
        raise CatalogError(f"Catalog missing score items: {sorted(i.value for i in missing)}")


def catalog_from_dict(data: dict[str, Any]) -> ScoringCatalog:
    """Build and validate a catalog from plain (YAML/JSON-decoded) data."""
    if not isinstance(data, dict):
        raise CatalogError("Catalog configuration must be a mapping")

    raw_categories = _require_list(data.get("categories", []), "Catalog categories")
    categories = tuple(_build_category(raw) for raw in raw_categories)
    if not categories:
        raise CatalogError("Catalog defines no categories")
    _validate_item_ids(categories)

    threshold = data.get("total_score_required", DEFAULT_TOTAL_SCORE_REQUIRED)
    if not _is_count(threshold):
        raise CatalogError(f"Invalid total_score_required: {threshold!r}")

    return ScoringCatalog(
        categories=categories,
        threshold=threshold,
        version=str(data.get("version", "")),
    )


def load_catalog(path: Optional[Path] = None) -> ScoringCatalog:
    """Load the scoring catalog from a YAML or JSON file.

    Args:
        path: Catalog file. Defaults to ICS_SCORE_CATALOG or the bundled catalog.

    Returns:
        Validated ScoringCatalog

    Raises:
        CatalogError: If the file content is malformed
    """
    config_path = Path(path) if path is not None else get_catalog_path()
    if not config_path.exists():
        logger.warning(f"Score catalog not found at {config_path}, using bundled catalog")
        config_path = BUNDLED_CATALOG_PATH

    # JSON is valid YAML, so one loader covers both formats
    with open(config_path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogError(f"Failed to parse score catalog {config_path}: {e}") from e

    catalog = catalog_from_dict(raw)
    logger.info(
        f"Loaded score catalog v{catalog.version or '?'}: "
        f"{len(catalog.categories)} categories, {len(catalog.items)} items, threshold {catalog.threshold}"
    )
    return catalog

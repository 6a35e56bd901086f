"""In-memory catalog adapter backed by a fixed product list."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from app.domain.errors import CatalogLoadError
from app.domain.models import CatalogItem
from app.ports.catalog import CatalogPort

logger = logging.getLogger(__name__)


def _placeholder(color: str, label: str) -> str:
    return f"https://placehold.co/400x400/{color}/ffffff?text={label}"


DEFAULT_PRODUCTS: tuple[CatalogItem, ...] = (
    CatalogItem(1, "Eco-Friendly Water Bottle", 18.00, "Accessories",
                frozenset({"eco-friendly", "hydration", "outdoors"}), _placeholder("3498db", "Bottle")),
    CatalogItem(2, "Modern Desk Lamp", 45.00, "Home Goods",
                frozenset({"lighting", "office", "modern"}), _placeholder("e74c3c", "Lamp")),
    CatalogItem(3, "Wireless Noise-Cancelling Headphones", 199.00, "Electronics",
                frozenset({"audio", "travel", "focus"}), _placeholder("2ecc71", "Headphones")),
    CatalogItem(4, "Organic Cotton T-Shirt", 25.00, "Apparel",
                frozenset({"clothing", "eco-friendly", "casual"}), _placeholder("9b59b6", "T-Shirt")),
    CatalogItem(5, "Smart Fitness Tracker", 89.00, "Electronics",
                frozenset({"health", "wearable", "fitness"}), _placeholder("f1c40f", "Tracker")),
    CatalogItem(6, "Leather-bound Journal", 22.00, "Stationery",
                frozenset({"office", "writing", "gift"}), _placeholder("1abc9c", "Journal")),
    CatalogItem(7, "Gourmet Coffee Beans", 15.00, "Food & Drink",
                frozenset({"coffee", "morning", "gift"}), _placeholder("d35400", "Coffee")),
    CatalogItem(8, "Travel Backpack", 75.00, "Accessories",
                frozenset({"travel", "outdoors", "storage"}), _placeholder("34495e", "Backpack")),
    CatalogItem(9, "Yoga Mat", 30.00, "Sports",
                frozenset({"fitness", "health", "yoga"}), _placeholder("7f8c8d", "Yoga+Mat")),
    CatalogItem(10, "Portable Bluetooth Speaker", 55.00, "Electronics",
                frozenset({"audio", "outdoors", "music"}), _placeholder("c0392b", "Speaker")),
    CatalogItem(11, "Canvas Wall Art", 60.00, "Home Goods",
                frozenset({"decor", "art", "modern"}), _placeholder("8e44ad", "Art")),
    CatalogItem(12, "Comfortable Running Shoes", 120.00, "Apparel",
                frozenset({"fitness", "footwear", "running"}), _placeholder("27ae60", "Shoes")),
)


class StaticCatalogAdapter(CatalogPort):
    """Serve catalog lookups from an immutable in-memory list."""

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        self._items = tuple(items)
        self._by_id: dict[int, CatalogItem] = {}
        for item in self._items:
            if item.id in self._by_id:
                raise ValueError(f"Duplicate catalog id: {item.id}")
            self._by_id[item.id] = item
        logger.info("StaticCatalog initialized with %d items", len(self._items))

    def list_items(self) -> list[CatalogItem]:
        return list(self._items)

    def find(self, item_id: int) -> CatalogItem | None:
        return self._by_id.get(item_id)

    def __len__(self) -> int:
        return len(self._items)


def load_catalog_file(path: str | Path) -> list[CatalogItem]:
    """Load a JSON array of product records from disk."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        logger.error("Catalog file not found: %s", path)
        raise CatalogLoadError(f"Catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in catalog file: %s", path)
        raise CatalogLoadError(f"Invalid JSON in {path}") from e

    if not isinstance(raw, list):
        raise CatalogLoadError(f"Catalog file {path} must contain a JSON array")

    try:
        items = [CatalogItem.from_dict(record) for record in raw]
    except (KeyError, TypeError, ValueError) as e:
        logger.error("Malformed product record in %s: %s", path, e)
        raise CatalogLoadError(f"Malformed product record in {path}: {e}") from e

    logger.info("Loaded %d products from %s", len(items), path)
    return items

"""Request-scoped domain value types."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CatalogItem:
    """A single product in the read-only catalog."""

    id: int
    name: str
    price: float
    category: str
    tags: frozenset[str] = field(default_factory=frozenset)
    image: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError(f"Item {self.id} has an invalid price: {self.price}")
        if isinstance(self.tags, str):
            raise TypeError(f"Item {self.id} tags must be a collection of strings, not a string")
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))
        if not all(isinstance(tag, str) for tag in self.tags):
            raise TypeError(f"Item {self.id} has a non-string tag")

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogItem":
        item_id = data["id"]
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise TypeError(f"Product id must be an integer, got {item_id!r}")
        price = data["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise TypeError(f"Product {item_id} price must be a number, got {price!r}")
        tags = data.get("tags", [])
        if not isinstance(tags, list):
            raise TypeError(f"Product {item_id} tags must be a list, got {tags!r}")
        return cls(
            id=item_id,
            name=str(data["name"]),
            price=float(price),
            category=str(data["category"]),
            tags=frozenset(tags),
            image=str(data.get("image", "")),
        )

    def sorted_tags(self) -> list[str]:
        return sorted(self.tags)


@dataclass(frozen=True)
class ScoredCandidate:
    """An unviewed catalog item with its overlap score."""

    item: CatalogItem
    score: int


@dataclass(frozen=True)
class ExplanationRequest:
    """Viewed items plus the recommended target to justify."""

    history: tuple[CatalogItem, ...]
    target: CatalogItem

    @classmethod
    def build(cls, history: Iterable[CatalogItem], target: CatalogItem) -> "ExplanationRequest":
        return cls(history=tuple(history), target=target)


@dataclass(frozen=True)
class ExplanationResult:
    """
    Outcome of an explanation request.

    ``was_generated`` is False when the fallback text was substituted for a
    live generation.
    """

    text: str
    was_generated: bool

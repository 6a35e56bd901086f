"""Catalog port: abstract read-only product lookup."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from app.domain.errors import UnknownItemError
from app.domain.models import CatalogItem


class CatalogPort(ABC):
    """Abstraction over the external catalog provider."""

    @abstractmethod
    def list_items(self) -> list[CatalogItem]:
        """Return every catalog item in catalog order."""
        ...

    @abstractmethod
    def find(self, item_id: int) -> CatalogItem | None:
        """Return the item with this id, or None."""
        ...

    def get(self, item_id: int) -> CatalogItem:
        """Return the item with this id. Raises UnknownItemError if absent."""
        item = self.find(item_id)
        if item is None:
            raise UnknownItemError(item_id)
        return item

    def resolve(self, item_ids: Iterable[int]) -> list[CatalogItem]:
        """Resolve ids in order. Raises UnknownItemError on the first miss."""
        return [self.get(item_id) for item_id in item_ids]

"""Exception hierarchy for the recommender core."""


class RecommenderError(Exception):
    """Base exception for the project."""


class EmptyHistoryError(RecommenderError):
    """Raised when scoring is requested with no viewed items."""

    def __init__(self) -> None:
        super().__init__("User history is empty.")


class UnknownItemError(RecommenderError):
    """Raised when an item id does not resolve in the catalog."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Product {item_id} not found in catalog")


class CatalogLoadError(RecommenderError):
    """Raised when a catalog file cannot be loaded."""


class GenerationError(RecommenderError):
    """
    Any failure of the text-generation provider.

    Network errors, timeouts, non-2xx statuses, malformed bodies, empty text
    and missing credentials all collapse into this one type.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

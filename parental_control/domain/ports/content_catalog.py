"""Port interface for content catalogs."""

from typing import Optional, Protocol

from ..models.content_item import ContentItem


class ContentCatalog(Protocol):
    """Protocol for the catalog the access decision engine reads from.

    The engine only needs to resolve a title. Search, filtering and
    statistics belong to concrete catalogs in the infrastructure layer.
    """

    def find_by_title(self, title: str) -> Optional[ContentItem]:
        """Find an item by exact title, ignoring case and surrounding whitespace.

        Args:
            title: Title to resolve

        Returns:
            The matching item, or None if the catalog has no such title

        Raises:
            ValueError: If the title is None or blank
        """
        ...

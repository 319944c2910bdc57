"""In-memory implementation of the content catalog port."""

import logging
from collections import Counter
from typing import Dict, List, Optional

from ...domain.models.classification import Classification
from ...domain.models.content_item import ContentItem

logger = logging.getLogger(__name__)

SAMPLE_CONTENT: List[ContentItem] = [
    ContentItem(1, "Baby's Day Out", Classification.U, "Comedy", 1994),
    ContentItem(2, "Notting Hill", Classification.PG_13, "Romance", 1999),
    ContentItem(3, "The Lion King", Classification.PG, "Animation", 1994),
    ContentItem(4, "Inception", Classification.PG_13, "Sci-Fi", 2010),
    ContentItem(5, "The Matrix", Classification.R, "Action", 1999),
    ContentItem(6, "Finding Nemo", Classification.U, "Animation", 2003),
    ContentItem(7, "The Dark Knight", Classification.PG_13, "Action", 2008),
    ContentItem(8, "Deadpool", Classification.R, "Action", 2016),
]


def _by_title(item: ContentItem) -> str:
    return item.title


class InMemoryContentCatalog:
    """Catalog holding content items in memory.

    Items are indexed by identifier and by lower-cased title. The catalog
    is populated once at startup and only read afterwards.
    """

    def __init__(self):
        """Initialize an empty catalog."""
        self._items: Dict[int, ContentItem] = {}
        self._items_by_title: Dict[str, ContentItem] = {}

    @classmethod
    def with_sample_data(cls) -> "InMemoryContentCatalog":
        """Create a catalog seeded with the sample titles."""
        catalog = cls()
        for item in SAMPLE_CONTENT:
            catalog.add(item)
        logger.info(f"🎬 Initialized content catalog with {len(catalog)} items")
        return catalog

    def add(self, item: ContentItem) -> None:
        """Index a content item by identifier and title.

        Args:
            item: Item to add; replaces any item with the same id or title
        """
        if item is None:
            raise ValueError("Content item cannot be null")

        # Drop whatever either index held for this id or title so both stay in step
        previous_by_id = self._items.pop(item.item_id, None)
        if previous_by_id is not None:
            self._items_by_title.pop(previous_by_id.normalized_title, None)
        previous_by_title = self._items_by_title.pop(item.normalized_title, None)
        if previous_by_title is not None:
            self._items.pop(previous_by_title.item_id, None)

        self._items[item.item_id] = item
        self._items_by_title[item.normalized_title] = item

    def find_by_title(self, title: str) -> Optional[ContentItem]:
        """Find an item by exact title, ignoring case and surrounding whitespace.

        Args:
            title: Title to resolve

        Returns:
            The matching item, or None if not found

        Raises:
            ValueError: If the title is None or blank
        """
        if title is None or not title.strip():
            raise ValueError("Content title cannot be null or empty")

        item = self._items_by_title.get(title.strip().lower())
        if item is None:
            logger.warning(f"⚠️ Content not found: {title}")
            return None

        logger.debug(f"🔍 Found content: {item}")
        return item

    def find_by_id(self, item_id: int) -> Optional[ContentItem]:
        """Find an item by its identifier."""
        item = self._items.get(item_id)
        if item is None:
            logger.warning(f"⚠️ Content not found with ID: {item_id}")
            return None

        logger.debug(f"🔍 Found content: {item}")
        return item

    def search_by_title(self, fragment: str) -> List[ContentItem]:
        """Find items whose title contains a fragment, ignoring case.

        Args:
            fragment: Partial title to look for

        Returns:
            Matching items; empty for a None or blank fragment
        """
        if fragment is None or not fragment.strip():
            return []

        term = fragment.strip().lower()
        results = [item for item in self._items.values() if term in item.normalized_title]
        logger.debug(f"🔍 Search for '{fragment}' returned {len(results)} results")
        return results

    def find_by_classification(self, classification: Classification) -> List[ContentItem]:
        """Get items with exactly the given classification, sorted by title."""
        if classification is None:
            return []
        return sorted(
            (item for item in self._items.values() if item.classification is classification),
            key=_by_title,
        )

    def find_accessible_under(self, ceiling: Classification) -> List[ContentItem]:
        """Get items a viewer with the given ceiling may access, sorted by title."""
        if ceiling is None:
            return []
        return sorted(
            (item for item in self._items.values() if item.classification.is_accessible_under(ceiling)),
            key=_by_title,
        )

    def all_items(self) -> List[ContentItem]:
        """Get every item, sorted by title."""
        return sorted(self._items.values(), key=_by_title)

    def count_by_classification(self) -> Dict[Classification, int]:
        """Count items per classification.

        Returns:
            Mapping of classification to item count; classifications with
            no items are omitted
        """
        return dict(Counter(item.classification for item in self._items.values()))

    def exists(self, title: str) -> bool:
        """Check if an item with the given title exists."""
        if title is None or not title.strip():
            return False
        return title.strip().lower() in self._items_by_title

    def __len__(self) -> int:
        return len(self._items)

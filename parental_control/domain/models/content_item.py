"""Domain model for catalog content."""

from dataclasses import dataclass
from typing import Optional

from .classification import Classification


@dataclass(frozen=True, eq=False)
class ContentItem:
    """A titled piece of content with its classification.

    Identity is the (item_id, title) pair; classification, genre and
    release year do not take part in equality.
    """

    item_id: int
    title: str
    classification: Classification
    genre: Optional[str] = ""
    release_year: int = 0

    def __post_init__(self):
        """Validate and normalize the item."""
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Content title cannot be null or empty")
        if not isinstance(self.classification, Classification):
            raise ValueError("Content classification cannot be null")

        object.__setattr__(self, "title", self.title.strip())
        object.__setattr__(self, "genre", self.genre.strip() if isinstance(self.genre, str) else "")

    @property
    def normalized_title(self) -> str:
        """Title key used for case-insensitive lookups."""
        return self.title.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentItem):
            return NotImplemented
        return self.item_id == other.item_id and self.title == other.title

    def __hash__(self) -> int:
        return hash((self.item_id, self.title))

    def __repr__(self) -> str:
        return (
            f"ContentItem(item_id={self.item_id}, title='{self.title}', "
            f"classification={self.classification}, genre='{self.genre}', "
            f"release_year={self.release_year})"
        )

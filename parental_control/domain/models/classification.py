"""Domain model for content classifications."""

from enum import Enum


class UnknownClassificationError(ValueError):
    """Raised when text does not name any classification."""

    def __init__(self, text: str):
        super().__init__(f"Unknown classification: {text}")
        self.text = text


class Classification(Enum):
    """Content classifications, declared from least to most restrictive.

    Restrictiveness is defined by declaration order only. The nominal
    minimum ages are informational and are not monotonic in rank.
    """

    U = ("Universal", "Suitable for all ages", 0)
    PG = ("Parental Guidance", "General viewing, some scenes may be unsuitable for young children", 8)
    PG_13 = ("Parental Guidance 13", "Some material may be inappropriate for children under 13", 13)
    TWELVE = ("12", "Suitable only for persons of 12 years and over", 12)
    FIFTEEN = ("15", "Suitable only for persons of 15 years and over", 15)
    EIGHTEEN = ("18", "Suitable only for persons of 18 years and over", 18)
    R = ("Restricted", "Under 17 requires accompanying parent or adult guardian", 17)

    def __init__(self, label: str, description: str, minimum_age: int):
        self.label = label
        self.description = description
        self.minimum_age = minimum_age

    @property
    def rank(self) -> int:
        """Position in declaration order (0 is least restrictive)."""
        return _RANKS[self]

    def is_more_restrictive_than(self, other: "Classification") -> bool:
        """Check if this classification ranks above another."""
        return self.rank > other.rank

    def is_accessible_under(self, ceiling: "Classification") -> bool:
        """Check if content with this classification is permitted by a ceiling.

        Args:
            ceiling: The most restrictive classification a viewer may access

        Returns:
            True if this classification is no more restrictive than the ceiling
        """
        return self.rank <= ceiling.rank

    @classmethod
    def parse(cls, text: str) -> "Classification":
        """Resolve free text to a classification.

        The member name is tried first (``"pg 13"`` -> ``PG_13``), then each
        display label and member name is compared case-insensitively.

        Args:
            text: Classification name or display label

        Returns:
            The matching classification

        Raises:
            ValueError: If the text is None or blank
            UnknownClassificationError: If nothing matches
        """
        if text is None or not str(text).strip():
            raise ValueError("Classification text cannot be null or empty")

        raw = str(text).strip()
        normalized = raw.upper().replace(" ", "_")

        member = cls.__members__.get(normalized)
        if member is not None:
            return member

        for level in cls:
            if level.label.lower() == raw.lower() or level.name.lower() == normalized.lower():
                return level

        raise UnknownClassificationError(str(text))

    def __str__(self) -> str:
        return self.label


_RANKS = {level: position for position, level in enumerate(Classification)}

"""Domain model for viewers and their permitted classification."""

from dataclasses import dataclass
from typing import List, Tuple

from .classification import Classification

MIN_AGE = 0
MAX_AGE = 150
ADULT_AGE = 18

# Upper age bound (exclusive) of each band, least restrictive first.
DEFAULT_CEILING_BANDS: List[Tuple[int, Classification]] = [
    (8, Classification.U),
    (12, Classification.PG),
    (13, Classification.TWELVE),
    (15, Classification.PG_13),
    (18, Classification.FIFTEEN),
]
TOP_BAND_CEILING = Classification.EIGHTEEN


def default_ceiling_for_age(age: int) -> Classification:
    """Pick the ceiling for the first age band the viewer falls into.

    Args:
        age: Viewer age in years

    Returns:
        Default ceiling classification for that age
    """
    for upper_bound, ceiling in DEFAULT_CEILING_BANDS:
        if age < upper_bound:
            return ceiling
    return TOP_BAND_CEILING


def _is_valid_age(age) -> bool:
    # bool is an int subclass but not an age
    return isinstance(age, int) and not isinstance(age, bool) and MIN_AGE <= age <= MAX_AGE


@dataclass(frozen=True, eq=False)
class Viewer:
    """A person requesting access to content.

    Two viewers are the same entity when their names match, regardless of
    age or ceiling.
    """

    name: str
    age: int
    ceiling: Classification

    def __post_init__(self):
        """Validate and normalize the viewer."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Viewer name cannot be null or empty")
        if not _is_valid_age(self.age):
            raise ValueError(f"Age must be between {MIN_AGE} and {MAX_AGE}")
        if not isinstance(self.ceiling, Classification):
            raise ValueError("Viewer ceiling cannot be null")

        object.__setattr__(self, "name", self.name.strip())

    @classmethod
    def with_default_ceiling(cls, name: str, age: int) -> "Viewer":
        """Create a viewer whose ceiling is derived from their age."""
        if not _is_valid_age(age):
            raise ValueError(f"Age must be between {MIN_AGE} and {MAX_AGE}")
        return cls(name=name, age=age, ceiling=default_ceiling_for_age(age))

    @property
    def is_adult(self) -> bool:
        """Check if the viewer is an adult."""
        return self.age >= ADULT_AGE

    def can_watch(self, classification: Classification) -> bool:
        """Check if content with the given classification is within the ceiling."""
        return classification.is_accessible_under(self.ceiling)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Viewer):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return (
            f"Viewer(name='{self.name}', age={self.age}, "
            f"ceiling={self.ceiling}, is_adult={self.is_adult})"
        )

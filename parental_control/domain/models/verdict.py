"""Domain model for access decisions."""

from datetime import datetime

from pydantic import BaseModel, Field


class Verdict(BaseModel):
    """Outcome of a single access decision.

    Build instances through ``Verdict.allow`` or ``Verdict.deny``.
    """

    allowed: bool = Field(..., description="Whether access is permitted")
    reason: str = Field(..., description="Human-readable explanation of the decision")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the decision was made")

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model

    @classmethod
    def allow(cls, reason: str) -> "Verdict":
        """Create a verdict granting access."""
        return cls(allowed=True, reason=reason)

    @classmethod
    def deny(cls, reason: str) -> "Verdict":
        """Create a verdict refusing access."""
        return cls(allowed=False, reason=reason)

    def __repr__(self) -> str:
        return f"Verdict(allowed={self.allowed}, reason='{self.reason}')"

    def __str__(self) -> str:
        return repr(self)

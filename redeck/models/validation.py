"""
Deck validation report.

Construction-rule violations are reported, never raised. Every rule is
evaluated on each pass so a caller can show all problems at once.
"""

from enum import Enum

from pydantic import BaseModel, Field


class IssueType(str, Enum):
    """Severity of a validation issue. Only ERROR affects validity."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueCategory(str, Enum):
    """Which construction rule produced an issue."""

    SIZE = "size"
    SOULS = "souls"
    QUANTITY = "quantity"
    RESERVE = "reserve"
    DOMINANTS = "dominants"
    FORMAT = "format"
    PARAGON = "paragon"


class ValidationIssue(BaseModel):
    """A single rule violation or notice."""

    model_config = {"frozen": True}

    type: IssueType
    category: IssueCategory
    message: str


class ValidationStats(BaseModel):
    """Aggregate counts computed while validating."""

    total_cards: int = 0
    main_deck_size: int = 0
    reserve_size: int = 0
    lost_soul_count: int = Field(
        default=0,
        description="Main deck Lost Souls counted toward the requirement (Hoppers excluded)",
    )
    required_lost_souls: int = 0
    dominant_count: int = Field(
        default=0,
        description="Dominants in main deck and reserve combined",
    )


class ParagonBrigadeStats(BaseModel):
    """Realized bucket counts for a Paragon deck."""

    primary_good: int = 0
    other_good: int = 0
    neutral: int = 0
    primary_evil: int = 0
    other_evil: int = 0
    dominants: int = 0


class DeckValidation(BaseModel):
    """Result of validating a deck."""

    is_valid: bool
    issues: list[ValidationIssue] = Field(default_factory=list)
    stats: ValidationStats = Field(default_factory=ValidationStats)
    paragon_stats: ParagonBrigadeStats | None = None

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.type == IssueType.ERROR]

    def issues_in(self, category: IssueCategory) -> list[ValidationIssue]:
        """Issues produced by one rule category."""
        return [i for i in self.issues if i.category == category]

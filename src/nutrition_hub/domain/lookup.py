"""Lookup outcome models."""

from dataclasses import dataclass
from enum import StrEnum

from nutrition_hub.domain.foods import Food


class LookupStatus(StrEnum):
    """Steady-state outcomes of a food lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LookupResult:
    """Tagged result of a lookup; `food` is set only when found."""

    status: LookupStatus
    slug: str
    food: Food | None = None

    @classmethod
    def found(cls, food: Food) -> "LookupResult":
        return cls(status=LookupStatus.FOUND, slug=food.slug, food=food)

    @classmethod
    def not_found(cls, slug: str) -> "LookupResult":
        return cls(status=LookupStatus.NOT_FOUND, slug=slug)

    @classmethod
    def unavailable(cls, slug: str) -> "LookupResult":
        return cls(status=LookupStatus.UNAVAILABLE, slug=slug)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a raw search query."""

    is_valid: bool
    errors: list[str]
    normalized_query: str

"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel


class ActivityType(str, Enum):
    """Activity category requested from the model."""

    food = "food"
    sightseeing = "sightseeing"
    relax = "relax"


class BudgetTier(str, Enum):
    """Budget tiers offered by the trip form. Free text is also accepted."""

    budget = "Budget"
    medium = "Medium"
    luxury = "Luxury"


class ImageSource(str, Enum):
    """Where a hero image URL came from."""

    photo_search = "photo_search"
    placeholder = "placeholder"


class HeroImage(BaseModel):
    """Resolved destination photo with its provenance."""

    url: str
    source: ImageSource
    fallback_reason: str | None = None

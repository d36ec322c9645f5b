"""Models package - re-exports for convenience."""

from backend.app.models.common import ActivityType, BudgetTier, HeroImage, ImageSource
from backend.app.models.itinerary import (
    Activity,
    Currency,
    DayPlan,
    ItineraryDocument,
    ItineraryValidation,
    merge_hero_image,
    validate_itinerary,
)
from backend.app.models.trip import TripRequest

__all__ = [
    # Common
    "ActivityType",
    "BudgetTier",
    "HeroImage",
    "ImageSource",
    # Request
    "TripRequest",
    # Itinerary
    "ItineraryDocument",
    "DayPlan",
    "Activity",
    "Currency",
    "ItineraryValidation",
    "validate_itinerary",
    "merge_hero_image",
]

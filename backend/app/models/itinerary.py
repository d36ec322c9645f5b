"""Itinerary models - generated travel plan returned to the UI.

The generative model owns the shape of this document. These models describe
the expected fields leniently (everything optional, unknown keys kept) so
that validation can report issues and repair small gaps without rejecting
an otherwise usable plan.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class Activity(BaseModel):
    """Single activity within a day."""

    model_config = ConfigDict(extra="allow")

    time: str | None = Field(None, description="Free-form period label, e.g. 'Morning'")
    activity: str | None = Field(None, description="Activity name")
    type: str | None = Field(None, description="food | sightseeing | relax")
    description: str | None = None
    location: str | None = Field(None, description="Neighborhood or area")


class DayPlan(BaseModel):
    """Plan for a single day."""

    model_config = ConfigDict(extra="allow")

    day: int | None = Field(None, description="1-indexed day number")
    date: str | None = None
    theme: str | None = None
    activities: list[Activity] = Field(default_factory=list)


class Currency(BaseModel):
    """Money notes for the destination."""

    model_config = ConfigDict(extra="allow")

    code: str | None = None
    rate: str | float | None = None
    tips: str | None = None


class ItineraryDocument(BaseModel):
    """Complete itinerary as produced by the model plus the hero image."""

    model_config = ConfigDict(extra="allow")

    tripTitle: str | None = None
    summary: str | None = None
    currency: Currency | None = None
    weather: str | None = None
    packingList: list[str] = Field(default_factory=list)
    localTips: list[str] = Field(default_factory=list)
    days: list[DayPlan] = Field(default_factory=list)
    heroImage: str | None = Field(None, description="Injected by the server, never by the model")


@dataclass
class ItineraryValidation:
    """Outcome of validating a parsed model response."""

    document: dict[str, Any]
    valid: bool
    issues: list[str] = field(default_factory=list)
    repairs: list[str] = field(default_factory=list)


def _format_error_location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def validate_itinerary(data: dict[str, Any]) -> ItineraryValidation:
    """Validate a parsed itinerary and repair what can be repaired.

    Validation never rejects the document. When the object does not match
    the expected shape it is passed through unchanged and the issues are
    returned for logging. When it does match, the original values are kept
    as sent (no type coercion) and days without a day number get their
    1-based position.

    Args:
        data: JSON object parsed from the model response

    Returns:
        ItineraryValidation with the document to send and any issues/repairs
    """
    try:
        ItineraryDocument.model_validate(data)
    except ValidationError as e:
        issues = [
            f"{_format_error_location(err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        logger.warning(f"Itinerary failed validation, passing through as-is: {issues}")
        return ItineraryValidation(document=data, valid=False, issues=issues)

    # Validated values are not dumped back; only day numbers are written
    repairs = []
    days = []
    for position, day in enumerate(data.get("days") or [], start=1):
        if day.get("day") is None:
            day = {**day, "day": position}
            repairs.append(f"days.{position - 1}.day set to {position}")
        days.append(day)

    document = data
    if repairs:
        logger.info(f"Repaired itinerary: {repairs}")
        document = {**data, "days": days}

    return ItineraryValidation(
        document=document,
        valid=True,
        repairs=repairs,
    )


def merge_hero_image(document: dict[str, Any], hero_image_url: str) -> dict[str, Any]:
    """Return a copy of the document with heroImage set to the server's URL.

    Any heroImage the model produced is overwritten.
    """
    return {**document, "heroImage": hero_image_url}

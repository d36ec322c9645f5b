"""Trip request model - user input from the planner form."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from backend.app.models.common import BudgetTier


class TripRequest(BaseModel):
    """Trip parameters submitted to POST /api/itinerary.

    Required fields are optional at the schema level so that a missing
    destination or day count is reported as a 400 by the handler instead of
    a framework validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    destination: str | None = None
    days: int | None = None
    budget: str = Field(BudgetTier.medium.value, description="Budget tier or free text")
    travelers: str = "Couple"
    interests: list[str] = Field(default_factory=list)
    start_date: str | None = Field(None, alias="startDate", description="ISO date (YYYY-MM-DD)")

    @field_validator("destination", "start_date")
    @classmethod
    def strip_blank(cls, v: str | None) -> str | None:
        """Treat whitespace-only strings as absent."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("interests", mode="before")
    @classmethod
    def interests_default(cls, v: Any) -> Any:
        """Accept null interests as an empty list."""
        return [] if v is None else v

    @field_validator("budget", "travelers", mode="before")
    @classmethod
    def text_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Fall back to the form defaults for null or blank values."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.model_fields[info.field_name].default
        return v

    def missing_required_fields(self) -> list[str]:
        """Names of required fields that are absent or unusable."""
        missing = []
        if not self.destination:
            missing.append("destination")
        if not self.days or self.days <= 0:
            missing.append("days")
        return missing

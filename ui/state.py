"""Planner view state - form fields, request lifecycle, and view toggles.

Kept free of Streamlit so the transitions can be unit tested. The app stores
one PlannerState in st.session_state and calls these methods from its
event handlers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

COPIED_RESET_S = 2.0


class Phase(str, Enum):
    """Request lifecycle."""

    idle = "idle"
    submitting = "submitting"
    success = "success"
    failed = "failed"


class Tab(str, Enum):
    """Result tabs."""

    itinerary = "itinerary"
    intel = "intel"
    map = "map"


@dataclass
class TripForm:
    """Controlled form values."""

    destination: str = ""
    days: int = 3
    budget: str = "Medium"
    travelers: str = "Couple"
    interests: list[str] = field(default_factory=list)
    start_date: str = ""

    def toggle_interest(self, interest: str) -> None:
        """Add the interest if absent, remove it if present. Order is kept."""
        if interest in self.interests:
            self.interests = [i for i in self.interests if i != interest]
        else:
            self.interests = [*self.interests, interest]

    def to_payload(self) -> dict[str, Any]:
        """TripRequest body for POST /api/itinerary."""
        return {
            "destination": self.destination.strip(),
            "days": int(self.days),
            "budget": self.budget,
            "travelers": self.travelers,
            "interests": list(self.interests),
            "startDate": self.start_date,
        }


@dataclass
class PlannerState:
    """Client-side view state for the planner page."""

    form: TripForm = field(default_factory=TripForm)
    phase: Phase = Phase.idle
    itinerary: dict[str, Any] | None = None
    loading_step: str = ""
    error: str = ""
    active_tab: Tab = Tab.itinerary
    copied_at: float | None = None
    copied_text: str = ""

    @property
    def loading(self) -> bool:
        return self.phase == Phase.submitting

    def begin_submission(self) -> bool:
        """Start a request if the form is usable.

        Returns:
            True if the request should be sent, False if the form was rejected
            or a request is already in flight
        """
        if self.loading:
            return False
        if not self.form.destination.strip():
            self.error = "Please enter a destination."
            return False

        self.phase = Phase.submitting
        self.itinerary = None
        self.error = ""
        self.loading_step = ""
        return True

    def cancel_submission(self) -> None:
        """Return to idle if a request was left in flight by an interrupted run."""
        if self.loading:
            self.phase = Phase.idle
            self.loading_step = ""

    def set_step(self, step: str) -> None:
        self.loading_step = step

    def succeed(self, itinerary: dict[str, Any]) -> None:
        """Store the returned document."""
        self.phase = Phase.success
        self.itinerary = itinerary
        self.error = ""
        self.loading_step = ""
        self.active_tab = Tab.itinerary

    def fail(self, message: str) -> None:
        """Record a failed request."""
        self.phase = Phase.failed
        self.itinerary = None
        self.error = message or "Failed to contact the Travel Agent API."
        self.loading_step = ""

    def select_tab(self, tab: Tab | str) -> None:
        self.active_tab = Tab(tab)

    def mark_copied(self, now: float, text: str = "") -> None:
        """Record a copy-to-clipboard action of `text` at time `now` (seconds)."""
        self.copied_at = now
        self.copied_text = text

    def is_copied(self, now: float) -> bool:
        """True for COPIED_RESET_S seconds after the last copy."""
        if self.copied_at is None:
            return False
        if now - self.copied_at >= COPIED_RESET_S:
            self.copied_at = None
            self.copied_text = ""
            return False
        return True

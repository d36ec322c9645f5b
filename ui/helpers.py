"""Helper functions for UI - /api/itinerary client and plan formatting."""

import logging
from typing import Any
from urllib.parse import quote, quote_plus

import httpx

logger = logging.getLogger(__name__)

INTERESTS = ["History", "Food", "Nature", "Art", "Shopping", "Nightlife", "Relaxation"]
DURATION_OPTIONS = [1, 2, 3, 4, 5, 7, 10, 14]
BUDGET_OPTIONS = ["Budget", "Medium", "Luxury"]
TRAVELER_OPTIONS = ["Solo", "Couple", "Family", "Friends"]

# Cosmetic progress, not tied to the real request
LOADING_STEP_DELAY_S = 0.8

NETWORK_ERROR_MESSAGE = "Failed to contact the Travel Agent API."

ACTIVITY_ICONS = {
    "food": "🍽️",
    "sightseeing": "📷",
    "relax": "☀️",
}


class ItineraryRequestError(Exception):
    """Itinerary request failed; message is safe to show to the user."""

    pass


def loading_steps(destination: str, start_date: str | None = None) -> list[str]:
    """Fixed status messages shown while a plan is being generated."""
    return [
        "Connecting to secure API...",
        f"Analysing geography for {destination}...",
        f"Checking forecast for {start_date or 'optimal season'}...",
        "Finalizing logistics...",
    ]


def decode_error_response(response: httpx.Response) -> str:
    """Extract a user-facing message from a non-OK response.

    Args:
        response: Response with a 4xx/5xx status

    Returns:
        Embedded error message for JSON responses, generic message otherwise
    """
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return f"Server responded with {response.status_code}"

    logger.error(f"Non-JSON Error Response: {response.text[:500]}")
    return (
        f"Server Error ({response.status_code}): API endpoint not found or server crashed."
    )


def call_itinerary_api(
    backend_url: str,
    payload: dict[str, Any],
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """Call POST /api/itinerary with the trip form.

    Args:
        backend_url: Backend base URL (e.g. http://localhost:8000)
        payload: TripRequest body
        client: Optional httpx client (for testing with mocks)

    Returns:
        Itinerary document dict

    Raises:
        ItineraryRequestError: With a message suitable for display
    """
    try:
        if client is None:
            response = httpx.post(
                f"{backend_url}/api/itinerary",
                json=payload,
                timeout=120.0,  # LLM generation can be slow
            )
        else:
            response = client.post(f"{backend_url}/api/itinerary", json=payload)
    except httpx.HTTPError as e:
        logger.error(f"Itinerary request failed: {e}")
        raise ItineraryRequestError(NETWORK_ERROR_MESSAGE) from e

    if not response.is_success:
        raise ItineraryRequestError(decode_error_response(response))

    try:
        result: dict[str, Any] = response.json()
    except ValueError as e:
        raise ItineraryRequestError(NETWORK_ERROR_MESSAGE) from e
    return result


def itinerary_days(itinerary: dict[str, Any]) -> list[dict[str, Any]]:
    """Day entries that are objects; anything else the model sent is skipped."""
    days = itinerary.get("days")
    if not isinstance(days, list):
        return []
    return [day for day in days if isinstance(day, dict)]


def day_activities(day: dict[str, Any]) -> list[dict[str, Any]]:
    """Activity entries of a day that are objects."""
    activities = day.get("activities")
    if not isinstance(activities, list):
        return []
    return [activity for activity in activities if isinstance(activity, dict)]


def trip_locations(itinerary: dict[str, Any]) -> list[str]:
    """Distinct activity locations in visiting order."""
    locations = [
        activity["location"]
        for day in itinerary_days(itinerary)
        for activity in day_activities(day)
        if isinstance(activity.get("location"), str) and activity["location"].strip()
    ]
    return list(dict.fromkeys(locations))


def text_items(value: Any) -> list[str]:
    """List entries as strings. A lone string is one entry."""
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def format_plan_text(itinerary: dict[str, Any], destination: str) -> str:
    """Format an itinerary as plain text for the clipboard.

    Args:
        itinerary: Itinerary document (fields may be missing)
        destination: Destination as typed in the form

    Returns:
        Title line, then one block per day with its activities
    """
    blocks = []
    for day in itinerary_days(itinerary):
        lines = [f"Day {day.get('day', '')}: {day.get('theme', '')}"]
        for activity in day_activities(day):
            lines.append(f"- {activity.get('time', '')}: {activity.get('activity', '')}")
        blocks.append("\n".join(lines))

    return f"Trip to {destination}\n\n" + "\n\n".join(blocks)


def maps_embed_url(query: str) -> str:
    """Embeddable map URL centred on a place."""
    return f"https://maps.google.com/maps?q={quote(query)}&output=embed"


def maps_search_url(query: str) -> str:
    """Link that opens a place in the maps site."""
    return f"https://www.google.com/maps/search/?api=1&query={quote_plus(query)}"


def web_search_url(query: str) -> str:
    """Link to a general web search."""
    return f"https://www.google.com/search?q={quote_plus(query)}"


def activity_icon(activity_type: Any) -> str:
    """Icon for an activity type; unknown types get a pin."""
    if not isinstance(activity_type, str):
        return "📍"
    return ACTIVITY_ICONS.get(activity_type.lower(), "📍")

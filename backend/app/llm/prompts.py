"""Prompt construction for itinerary generation."""

from backend.app.models.common import ActivityType
from backend.app.models.trip import TripRequest

DEFAULT_SEASON_HINT = "assume optimal season"

ITINERARY_JSON_SHAPE = """{
  "tripTitle": "Creative Trip Name",
  "summary": "A 2-sentence captivating summary.",
  "currency": { "code": "USD/JPY/EUR", "rate": "Approximate exchange rate to USD", "tips": "Cash vs Card advice" },
  "weather": "Brief forecast for the travel dates or typical season",
  "packingList": ["item 1", "item 2", "item 3", "item 4", "item 5"],
  "localTips": ["cultural tip 1", "safety tip 2", "transport tip 3"],
  "days": [
    {
      "day": 1,%(date_line)s
      "theme": "Theme of the day",
      "activities": [
        {
          "time": "Morning/Afternoon/Evening",
          "activity": "Name of activity",
          "type": %(activity_types)s,
          "description": "Short description",
          "location": "Neighborhood/Area"
        }
      ]
    }
  ]
}"""


def _activity_type_literal() -> str:
    return " | ".join(f'"{t.value}"' for t in ActivityType)


def build_itinerary_prompt(request: TripRequest) -> str:
    """Build the single-shot prompt asking for a JSON itinerary.

    Args:
        request: Validated trip request (destination and days present)

    Returns:
        Prompt text with exact field names and enum values inline
    """
    interests = ", ".join(request.interests) if request.interests else "General sightseeing"
    timing = f"Starting on {request.start_date}" if request.start_date else DEFAULT_SEASON_HINT

    date_line = '\n      "date": "YYYY-MM-DD",' if request.start_date else ""
    shape = ITINERARY_JSON_SHAPE % {
        "date_line": date_line,
        "activity_types": _activity_type_literal(),
    }

    lines = [
        "You are an expert travel agent. Create a comprehensive travel plan for a "
        f"{request.days}-day trip to {request.destination}.",
        "",
        "User Profile:",
        f"- Budget: {request.budget}",
        f"- Travelers: {request.travelers}",
        f"- Interests: {interests}",
        f"- Travel dates: {timing}",
        "",
        "Instructions:",
        "1. Return ONLY valid JSON. No markdown, no commentary.",
        "2. The JSON must follow this structure exactly:",
        shape,
        f"3. Include exactly {request.days} entries in \"days\", numbered from 1.",
        "4. Be specific with restaurant names and locations.",
    ]
    if request.start_date:
        lines.append("5. Give each day its calendar date, counting from the start date.")
    else:
        lines.append(f"5. No dates were given; {DEFAULT_SEASON_HINT} for weather and packing.")

    return "\n".join(lines)

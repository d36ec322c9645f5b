"""Export JSON schemas for TripRequest and ItineraryDocument."""

import json
from pathlib import Path

from backend.app.models import ItineraryDocument, TripRequest


def main() -> None:
    """Export schemas to docs/schemas/."""
    schemas_dir = Path("docs/schemas")
    schemas_dir.mkdir(parents=True, exist_ok=True)

    # Request body, by wire name (startDate)
    request_schema = TripRequest.model_json_schema(by_alias=True)
    request_path = schemas_dir / "TripRequest.schema.json"
    with open(request_path, "w") as f:
        json.dump(request_schema, f, indent=2)
    print(f"Exported TripRequest schema to {request_path}")

    itinerary_schema = ItineraryDocument.model_json_schema()
    itinerary_path = schemas_dir / "ItineraryDocument.schema.json"
    with open(itinerary_path, "w") as f:
        json.dump(itinerary_schema, f, indent=2)
    print(f"Exported ItineraryDocument schema to {itinerary_path}")


if __name__ == "__main__":
    main()

"""Tests for trip request and itinerary models."""

import pytest
from pydantic import ValidationError

from backend.app.models import (
    ItineraryDocument,
    TripRequest,
    merge_hero_image,
    validate_itinerary,
)


class TestTripRequest:
    """TripRequest parsing and required-field checks."""

    def test_accepts_wire_names(self) -> None:
        """Test that camelCase startDate populates start_date."""
        req = TripRequest.model_validate(
            {"destination": "Lisbon", "days": 4, "startDate": "2025-05-01"}
        )

        assert req.start_date == "2025-05-01"
        assert req.missing_required_fields() == []

    def test_defaults(self) -> None:
        """Test form defaults for optional fields."""
        req = TripRequest.model_validate({"destination": "Lisbon", "days": 2})

        assert req.budget == "Medium"
        assert req.travelers == "Couple"
        assert req.interests == []
        assert req.start_date is None

    def test_null_and_blank_optionals_use_defaults(self) -> None:
        """Test that null/blank optional values fall back to defaults."""
        req = TripRequest.model_validate(
            {
                "destination": "Lisbon",
                "days": 2,
                "budget": None,
                "travelers": "  ",
                "interests": None,
                "startDate": "",
            }
        )

        assert req.budget == "Medium"
        assert req.travelers == "Couple"
        assert req.interests == []
        assert req.start_date is None

    def test_free_text_budget_tolerated(self) -> None:
        """Test that budget is not restricted to the three tiers."""
        req = TripRequest.model_validate({"destination": "Oslo", "days": 1, "budget": "Backpacker"})
        assert req.budget == "Backpacker"

    @pytest.mark.parametrize(
        "payload,missing",
        [
            ({}, ["destination", "days"]),
            ({"days": 3}, ["destination"]),
            ({"destination": "   ", "days": 3}, ["destination"]),
            ({"destination": "Kyoto"}, ["days"]),
            ({"destination": "Kyoto", "days": 0}, ["days"]),
            ({"destination": "Kyoto", "days": -2}, ["days"]),
        ],
    )
    def test_missing_required_fields(self, payload: dict, missing: list[str]) -> None:
        """Test that absent or unusable destination/days are reported."""
        assert TripRequest.model_validate(payload).missing_required_fields() == missing

    def test_numeric_string_days_coerced(self) -> None:
        """Test that "3" is accepted as 3 days."""
        assert TripRequest.model_validate({"destination": "Kyoto", "days": "3"}).days == 3

    def test_non_numeric_days_rejected(self) -> None:
        """Test that unusable day values fail validation."""
        with pytest.raises(ValidationError):
            TripRequest.model_validate({"destination": "Kyoto", "days": "three"})


class TestValidateItinerary:
    """Best-effort validation of model output."""

    def test_valid_document_round_trips(self, itinerary_factory) -> None:
        """Test that a well-formed document comes back unchanged."""
        data = itinerary_factory(num_days=3)

        result = validate_itinerary(data)

        assert result.valid is True
        assert result.issues == []
        assert result.repairs == []
        assert result.document == data

    def test_unknown_fields_are_kept(self, itinerary_factory) -> None:
        """Test that fields outside the schema pass through."""
        data = itinerary_factory(num_days=1)
        data["emergencyNumbers"] = {"police": "110"}
        data["days"][0]["activities"][0]["cost"] = "¥500"

        result = validate_itinerary(data)

        assert result.document["emergencyNumbers"] == {"police": "110"}
        assert result.document["days"][0]["activities"][0]["cost"] == "¥500"

    def test_absent_fields_are_not_invented(self) -> None:
        """Test that validation does not add defaults the model never sent."""
        result = validate_itinerary({"tripTitle": "Short"})

        assert result.valid is True
        assert result.document == {"tripTitle": "Short"}

    def test_missing_day_numbers_are_filled_from_position(self) -> None:
        """Test that days without a number get their 1-based position."""
        data = {
            "days": [
                {"theme": "Arrival", "activities": []},
                {"day": 2, "theme": "Temples", "activities": []},
                {"theme": "Departure", "activities": []},
            ]
        }

        result = validate_itinerary(data)

        assert [d["day"] for d in result.document["days"]] == [1, 2, 3]
        assert len(result.repairs) == 2

    def test_values_are_not_coerced(self) -> None:
        """Test that validated values come back exactly as the model sent them."""
        data = {
            "currency": {"code": "JPY", "rate": 150},
            "days": [{"day": "1", "theme": "Temples"}, {"theme": "Markets"}],
        }

        result = validate_itinerary(data)

        assert result.valid is True
        assert result.document["currency"]["rate"] == 150
        assert isinstance(result.document["currency"]["rate"], int)
        assert result.document["days"][0]["day"] == "1"
        assert result.document["days"][1]["day"] == 2
        # Input is not mutated
        assert "day" not in data["days"][1]

    def test_unknown_activity_type_kept(self) -> None:
        """Test that an activity type outside the enum is not rejected."""
        data = {"days": [{"day": 1, "activities": [{"activity": "Onsen", "type": "wellness"}]}]}

        result = validate_itinerary(data)

        assert result.valid is True
        assert result.document["days"][0]["activities"][0]["type"] == "wellness"

    def test_mistyped_document_passes_through(self) -> None:
        """Test that a document that fails validation is returned as-is with issues."""
        data = {"tripTitle": "Odd", "days": "three days of fun", "packingList": "shoes"}

        result = validate_itinerary(data)

        assert result.valid is False
        assert result.document is data
        assert any(issue.startswith("days") for issue in result.issues)
        assert any(issue.startswith("packingList") for issue in result.issues)


def test_merge_hero_image_overwrites_model_value() -> None:
    """Test that the server's hero image wins over one the model produced."""
    document = {"tripTitle": "Kyoto", "heroImage": "https://model.example/invented.jpg"}

    merged = merge_hero_image(document, "https://images.example/kyoto.jpg")

    assert merged["heroImage"] == "https://images.example/kyoto.jpg"
    assert merged["tripTitle"] == "Kyoto"
    # Input is not mutated
    assert document["heroImage"] == "https://model.example/invented.jpg"


def test_itinerary_document_schema_lists_wire_fields() -> None:
    """Test that the JSON schema exposes the document's field names."""
    schema = ItineraryDocument.model_json_schema()

    for name in ["tripTitle", "summary", "currency", "weather", "packingList", "localTips", "days", "heroImage"]:
        assert name in schema["properties"]

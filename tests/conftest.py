"""Shared pytest fixtures for all test suites."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from backend.app.config import Settings

PHOTO_URL = "https://images.unsplash.com/photo-kyoto?w=1080"


def make_itinerary(num_days: int = 3, activities_per_day: int = 2) -> dict[str, Any]:
    """Build a well-formed itinerary document like the model returns."""
    types = ["sightseeing", "food", "relax"]
    return {
        "tripTitle": "Temples and Tastes of Kyoto",
        "summary": "Lantern-lit lanes and moss gardens. Kaiseki dinners to close each day.",
        "currency": {"code": "JPY", "rate": "1 USD = 150 JPY", "tips": "Carry cash for temples."},
        "weather": "Mild, 15-22°C",
        "packingList": ["Walking shoes", "Umbrella", "Cash wallet", "Layers", "Adapter"],
        "localTips": ["Bow when greeting", "Stand left on escalators", "Buy an ICOCA card"],
        "days": [
            {
                "day": d,
                "theme": f"Theme {d}",
                "activities": [
                    {
                        "time": ["Morning", "Afternoon", "Evening"][a % 3],
                        "activity": f"Activity {d}.{a + 1}",
                        "type": types[a % 3],
                        "description": "Short description",
                        "location": "Higashiyama",
                    }
                    for a in range(activities_per_day)
                ],
            }
            for d in range(1, num_days + 1)
        ],
    }


class FakeLLMClient:
    """LLM client double recording prompts."""

    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.text = text if text is not None else json.dumps(make_itinerary())
        self.error = error
        self.prompts: list[str] = []

    async def generate_itinerary_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


class PhotoServer:
    """httpx mock transport handler for the photo search API."""

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        error: Exception | None = None,
    ):
        self.status_code = status_code
        self.body = body if body is not None else {"results": [{"urls": {"regular": PHOTO_URL}}]}
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Factory for settings that ignore the environment's .env file."""

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "openai_api_key": "test-openai-key",
            "unsplash_access_key": "test-unsplash-key",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings: Callable[..., Settings]) -> Settings:
    """Settings with both credentials configured."""
    return make_settings()


@pytest.fixture
def trip_payload() -> dict[str, Any]:
    """Kyoto request body as sent by the UI."""
    return {
        "destination": "Kyoto",
        "days": 3,
        "budget": "Medium",
        "travelers": "Couple",
        "interests": ["Food", "History"],
    }


@pytest.fixture
def itinerary_factory() -> Callable[..., dict[str, Any]]:
    """Builder for model-shaped itinerary documents."""
    return make_itinerary


@pytest.fixture
def fake_llm() -> Callable[..., FakeLLMClient]:
    """Factory for LLM client doubles."""
    return FakeLLMClient


@pytest.fixture
def photo_server() -> Callable[..., PhotoServer]:
    """Factory for photo search mock handlers."""
    return PhotoServer

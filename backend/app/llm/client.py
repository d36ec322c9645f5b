"""LLM client for itinerary generation with OpenAI integration.

Security: API key comes from Settings only, never hardcoded.
There is no offline fallback: a missing key is a server misconfiguration.
"""

import logging
from typing import Protocol

from openai import AsyncOpenAI, OpenAIError

from backend.app.config import Settings
from backend.app.errors import ServerMisconfigurationError, UpstreamCallError

logger = logging.getLogger(__name__)


class LLMClient(Protocol):
    """Protocol for LLM client implementations."""

    async def generate_itinerary_text(self, prompt: str) -> str:
        """Run a single JSON-mode completion for the given prompt.

        Args:
            prompt: Full instruction text (no conversation state)

        Returns:
            Raw model text, expected to contain a JSON object
        """
        ...


class OpenAIClient:
    """OpenAI-backed LLM client."""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", base_url: str | None = None):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key (read from settings)
            model: Model name to use (default: gpt-4o-mini for cost efficiency)
            base_url: Optional OpenAI-compatible endpoint
        """
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.model = model

    async def generate_itinerary_text(self, prompt: str) -> str:
        """Generate itinerary JSON text using the OpenAI API."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                response_format={"type": "json_object"},
                temperature=0.7,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI API call failed: {e}")
            raise UpstreamCallError(f"OpenAI API call failed: {e}") from e

        content = response.choices[0].message.content or ""
        if not content.strip():
            logger.warning("OpenAI returned empty response")
        return content


def get_llm_client(settings: Settings) -> LLMClient:
    """Factory function to build the LLM client from settings.

    Raises:
        ServerMisconfigurationError: If no API key is configured
    """
    if not settings.has_llm_credentials or settings.openai_api_key is None:
        logger.error("No OpenAI API key configured, itinerary generation unavailable")
        raise ServerMisconfigurationError("OPENAI_API_KEY is not set")

    return OpenAIClient(
        api_key=settings.openai_api_key.get_secret_value(),
        model=settings.openai_model,
        base_url=settings.openai_base_url,
    )

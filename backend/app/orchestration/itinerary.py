"""Itinerary pipeline - prompt, concurrent fan-out, parse, validate, merge.

One best-effort attempt per request:

1. Check the generative text credential and the required trip fields
2. Build the prompt
3. Run the text generation and the hero image lookup concurrently
4. Strip code fences and parse the model output as a JSON object
5. Validate (repairing small gaps) and overwrite heroImage

The image lookup degrades to a placeholder internally; any failure of the
text generation fails the whole request.
"""

import asyncio
import logging
import time
from typing import Any

import httpx
from pydantic import ValidationError

from backend.app.adapters.photos import resolve_hero_image
from backend.app.config import Settings
from backend.app.errors import (
    InvalidRequestError,
    ItineraryError,
    ServerMisconfigurationError,
    UpstreamCallError,
)
from backend.app.llm.client import LLMClient, get_llm_client
from backend.app.llm.parsing import parse_itinerary_text
from backend.app.llm.prompts import build_itinerary_prompt
from backend.app.models.itinerary import merge_hero_image, validate_itinerary
from backend.app.models.trip import TripRequest
from backend.app.utils.logging import StructuredCallLogger
from backend.app.utils.metrics import metrics

logger = logging.getLogger(__name__)
call_logger = StructuredCallLogger()

LLM_SERVICE_NAME = "llm.openai"


def parse_trip_request(body: Any) -> TripRequest:
    """Build a TripRequest from a decoded JSON body.

    Raises:
        InvalidRequestError: If the body is not an object or has unusable field types
    """
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    try:
        return TripRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid trip request: {e.error_count()} error(s)") from e


class ItineraryPipeline:
    """Generates an itinerary document for a trip request."""

    def __init__(
        self,
        settings: Settings,
        llm_client: LLMClient | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize pipeline.

        Args:
            settings: Application settings (credentials, endpoints)
            llm_client: Optional LLM client (built from settings when omitted)
            http_client: Optional httpx client for the photo search
        """
        self.settings = settings
        self._llm_client = llm_client
        self._http_client = http_client

    def ensure_configured(self) -> None:
        """Raise ServerMisconfigurationError if text generation is not configured."""
        if self._llm_client is None and not self.settings.has_llm_credentials:
            raise ServerMisconfigurationError("OPENAI_API_KEY is not set")

    @property
    def llm_client(self) -> LLMClient:
        if self._llm_client is None:
            self._llm_client = get_llm_client(self.settings)
        return self._llm_client

    async def generate(self, request: TripRequest) -> dict[str, Any]:
        """Run the pipeline for one trip request.

        Args:
            request: Trip parameters

        Returns:
            Itinerary document (JSON object) with heroImage set

        Raises:
            ServerMisconfigurationError: No generative text credential
            InvalidRequestError: Destination or days missing
            UpstreamParseError: Model output is not a JSON object
            UpstreamCallError: Generative text call failed
        """
        self.ensure_configured()

        missing = request.missing_required_fields()
        if missing:
            raise InvalidRequestError(f"Missing required fields: {', '.join(missing)}")

        # Guarded by missing_required_fields
        destination = request.destination or ""

        prompt = build_itinerary_prompt(request)

        image_task = asyncio.create_task(
            resolve_hero_image(destination, self.settings, client=self._http_client)
        )
        try:
            raw_text = await self._generate_text(prompt)
        except BaseException:
            # Text failure fails the request; drop the image lookup
            image_task.cancel()
            raise
        hero_image = await image_task

        data = parse_itinerary_text(raw_text)

        validation = validate_itinerary(data)
        if validation.issues:
            logger.warning(
                f"Itinerary for {destination} has {len(validation.issues)} schema issue(s)"
            )

        logger.info(
            f"Itinerary generated for {destination}: "
            f"{len(validation.document.get('days') or [])} day(s), "
            f"hero image from {hero_image.source.value}"
        )

        return merge_hero_image(validation.document, hero_image.url)

    async def _generate_text(self, prompt: str) -> str:
        """Call the LLM once, recording latency and outcome."""
        start = time.perf_counter()
        try:
            text = await self.llm_client.generate_itinerary_text(prompt)
        except Exception as e:
            latency_ms = (time.perf_counter() - start) * 1000
            reason = type(e).__name__
            call_logger.log_call(LLM_SERVICE_NAME, "error", latency_ms, error_reason=reason)
            metrics.record_latency(LLM_SERVICE_NAME, "error", latency_ms)
            metrics.inc_error(LLM_SERVICE_NAME, reason)
            if isinstance(e, ItineraryError):
                raise
            raise UpstreamCallError(f"LLM call failed: {e}") from e

        latency_ms = (time.perf_counter() - start) * 1000
        call_logger.log_call(LLM_SERVICE_NAME, "success", latency_ms, chars=len(text or ""))
        metrics.record_latency(LLM_SERVICE_NAME, "success", latency_ms)
        return text

"""Itinerary endpoint - POST /api/itinerary."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from backend.app.config import Settings, get_settings
from backend.app.errors import ItineraryError, UpstreamCallError
from backend.app.orchestration.itinerary import ItineraryPipeline, parse_trip_request
from backend.app.utils.metrics import metrics

router = APIRouter(prefix="/api", tags=["itinerary"])
logger = logging.getLogger(__name__)


def get_pipeline(settings: Annotated[Settings, Depends(get_settings)]) -> ItineraryPipeline:
    """Build the itinerary pipeline for a request."""
    return ItineraryPipeline(settings)


@router.post("/itinerary", status_code=status.HTTP_200_OK)
async def create_itinerary(
    pipeline: Annotated[ItineraryPipeline, Depends(get_pipeline)],
    body: Annotated[Any, Body()] = None,
) -> dict[str, Any]:
    """Generate a travel itinerary from trip preferences.

    Args:
        pipeline: Itinerary pipeline (settings, LLM client, photo search)
        body: TripRequest JSON (destination, days, budget, travelers, interests, startDate)

    Returns:
        Itinerary document with heroImage

    Raises:
        ItineraryError: Rendered as {"error": ...} by the app's exception handler
    """
    # Credential check comes before any look at the body
    pipeline.ensure_configured()

    trip = parse_trip_request(body)

    logger.info(f"[POST /api/itinerary] destination={trip.destination!r}, days={trip.days}")

    try:
        document = await pipeline.generate(trip)
    except ItineraryError:
        raise
    except Exception as e:
        logger.error(f"[POST /api/itinerary] failed: {e}", exc_info=True)
        raise UpstreamCallError(str(e)) from e

    metrics.inc_request("success")
    return document

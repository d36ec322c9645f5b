"""Destination photo adapter using the Unsplash search API.

Falls back to a keyword placeholder image whenever the search cannot
produce a photo. This adapter never raises.
"""

import logging
import time
from urllib.parse import quote

import httpx

from backend.app.config import Settings
from backend.app.models.common import HeroImage, ImageSource
from backend.app.utils.logging import StructuredCallLogger
from backend.app.utils.metrics import metrics

logger = logging.getLogger(__name__)
call_logger = StructuredCallLogger()

SERVICE_NAME = "photos.unsplash"


def placeholder_image_url(
    destination: str, base_url: str = "https://loremflickr.com/1600/900"
) -> str:
    """Build the keyword placeholder URL for a destination.

    Deterministic: the same destination always yields the same URL.
    """
    return f"{base_url.rstrip('/')}/{quote(destination.strip(), safe='')},travel"


def _placeholder(destination: str, settings: Settings, reason: str) -> HeroImage:
    metrics.inc_image_fallback(reason)
    return HeroImage(
        url=placeholder_image_url(destination, settings.placeholder_image_url),
        source=ImageSource.placeholder,
        fallback_reason=reason,
    )


async def resolve_hero_image(
    destination: str,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> HeroImage:
    """Resolve a representative landscape photo for a destination.

    Args:
        destination: Destination name used as the search keyword
        settings: Application settings (photo key, endpoints, timeout)
        client: Optional httpx client (for testing with mocks)

    Returns:
        HeroImage from photo search, or the placeholder on any failure
    """
    if not settings.has_photo_credentials or settings.unsplash_access_key is None:
        logger.info("No photo search key configured, using placeholder image")
        return _placeholder(destination, settings, "no_credentials")

    # Docs: https://unsplash.com/documentation#search-photos
    params: dict[str, str | int] = {
        "query": destination,
        "orientation": "landscape",
        "per_page": 1,
    }
    headers = {"Authorization": f"Client-ID {settings.unsplash_access_key.get_secret_value()}"}

    close_client = False
    if client is None:
        client = httpx.AsyncClient(timeout=settings.photo_timeout_s)
        close_client = True

    start = time.perf_counter()
    try:
        response = await client.get(settings.unsplash_api_url, params=params, headers=headers)
        latency_ms = (time.perf_counter() - start) * 1000

        if response.status_code != 200:
            reason = f"http_{response.status_code}"
            call_logger.log_call(SERVICE_NAME, "error", latency_ms, error_reason=reason)
            metrics.record_latency(SERVICE_NAME, "error", latency_ms)
            metrics.inc_error(SERVICE_NAME, reason)
            return _placeholder(destination, settings, reason)

        data = response.json()
        # Response structure: {results: [{urls: {regular: ...}}]}
        results = data.get("results") if isinstance(data, dict) else None
        url = None
        if isinstance(results, list) and results and isinstance(results[0], dict):
            url = (results[0].get("urls") or {}).get("regular")

        if not url:
            call_logger.log_call(SERVICE_NAME, "empty", latency_ms)
            metrics.record_latency(SERVICE_NAME, "empty", latency_ms)
            return _placeholder(destination, settings, "no_results")

        call_logger.log_call(SERVICE_NAME, "success", latency_ms)
        metrics.record_latency(SERVICE_NAME, "success", latency_ms)
        return HeroImage(url=url, source=ImageSource.photo_search)

    except (httpx.HTTPError, ValueError) as e:
        latency_ms = (time.perf_counter() - start) * 1000
        reason = type(e).__name__
        logger.warning(f"Image fetch failed, using fallback: {e}")
        call_logger.log_call(SERVICE_NAME, "error", latency_ms, error_reason=reason)
        metrics.record_latency(SERVICE_NAME, "error", latency_ms)
        metrics.inc_error(SERVICE_NAME, reason)
        return _placeholder(destination, settings, reason)
    finally:
        if close_client:
            await client.aclose()

"""Health check endpoints.

Reports whether the generative text and photo search credentials are
configured. Nothing is called outbound.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backend.app.config import Settings, get_settings

router = APIRouter()


def check_llm(settings: Settings) -> tuple[bool, str]:
    """Check generative text configuration.

    Returns:
        (is_ok, status_message)
    """
    if settings.has_llm_credentials:
        return (True, "configured")
    return (False, "missing_key")


def check_photos(settings: Settings) -> tuple[bool, str]:
    """Check photo search configuration. Never fails, only degrades."""
    if settings.has_photo_credentials:
        return (True, "configured")
    return (True, "placeholder")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz(
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict[str, Any] | JSONResponse:
    """Health check endpoint.

    Returns:
        200 with component status if itinerary generation is possible
        503 if the generative text key is missing
    """
    llm_ok, llm_status = check_llm(settings)
    photos_ok, photos_status = check_photos(settings)

    core_ok = llm_ok and photos_ok

    response_body = {
        "status": "ok" if core_ok else "degraded",
        "components": {
            "llm": llm_status,
            "photos": photos_status,
        },
    }

    if not core_ok:
        return JSONResponse(content=response_body, status_code=503)

    return response_body

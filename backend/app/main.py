"""FastAPI application - itinerary API."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.itinerary import router as itinerary_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.config import get_settings
from backend.app.errors import InvalidRequestError, ItineraryError
from backend.app.utils.logging import configure_logging
from backend.app.utils.metrics import metrics

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="WanderLust Itinerary API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ui_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(itinerary_router, tags=["itinerary"])


@app.exception_handler(ItineraryError)
async def itinerary_error_handler(request: Request, exc: ItineraryError) -> JSONResponse:
    """Render itinerary errors as {"error": public_message}."""
    if exc.status_code >= 500:
        logger.error(f"[{request.url.path}] {type(exc).__name__}: {exc}")
    else:
        logger.info(f"[{request.url.path}] rejected: {exc}")

    metrics.inc_request(type(exc).__name__)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 in the same error shape."""
    logger.info(f"[{request.url.path}] invalid body: {exc.errors()}")
    metrics.inc_request(InvalidRequestError.__name__)
    return JSONResponse(
        status_code=InvalidRequestError.status_code,
        content={"error": InvalidRequestError.public_message},
    )


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "WanderLust Itinerary API", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

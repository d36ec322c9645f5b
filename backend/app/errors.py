"""Itinerary error taxonomy.

Each error carries the HTTP status and the message shown to clients.
Diagnostic detail stays in the exception's own message and in server logs.
"""

GENERIC_FAILURE_MESSAGE = "Failed to generate itinerary. Please try again."
MISSING_FIELDS_MESSAGE = "Missing required fields: Destination and Days are required."
MISCONFIGURATION_MESSAGE = (
    "Server misconfiguration: API key missing. Please check your environment configuration."
)


class ItineraryError(Exception):
    """Base class for errors surfaced by POST /api/itinerary."""

    status_code: int = 500
    public_message: str = GENERIC_FAILURE_MESSAGE


class InvalidRequestError(ItineraryError):
    """Trip request is missing destination or days."""

    status_code = 400
    public_message = MISSING_FIELDS_MESSAGE


class ServerMisconfigurationError(ItineraryError):
    """Generative text credential is not configured."""

    status_code = 500
    public_message = MISCONFIGURATION_MESSAGE


class UpstreamParseError(ItineraryError):
    """Model output was not a JSON object after fence stripping."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class UpstreamCallError(ItineraryError):
    """Generative text service call failed."""

    pass

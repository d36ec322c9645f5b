"""Parsing of raw model text into a JSON object."""

import json
import logging
import re
from typing import Any

from backend.app.errors import UpstreamParseError

logger = logging.getLogger(__name__)

# ```json ... ``` (language tag optional), anchored to the whole response
_FENCE_RE = re.compile(r"^\s*```[A-Za-z]*[ \t]*\n?(.*?)\n?[ \t]*```\s*$", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapping the whole response, if present."""
    match = _FENCE_RE.match(text)
    if match:
        return match.group(1).strip()
    return text.strip()


def parse_itinerary_text(text: str | None) -> dict[str, Any]:
    """Parse model output into a JSON object.

    Args:
        text: Raw text returned by the generative model

    Returns:
        Parsed JSON object

    Raises:
        UpstreamParseError: If the text is empty, not JSON, or not a JSON object
    """
    raw = text or ""
    json_string = strip_code_fences(raw)

    if not json_string:
        logger.error("JSON Parse Error: model returned empty response")
        raise UpstreamParseError("Model returned empty response", raw_text=raw)

    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        logger.error(f"JSON Parse Error: {e}. Raw response: {raw!r}")
        raise UpstreamParseError("Failed to parse AI response", raw_text=raw) from e

    if not isinstance(data, dict):
        logger.error(f"JSON Parse Error: expected object, got {type(data).__name__}. Raw: {raw!r}")
        raise UpstreamParseError("AI response is not a JSON object", raw_text=raw)

    return data

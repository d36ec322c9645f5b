"""Logging setup and structured logging for outbound calls."""

import logging
import sys
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stdout handler on the root logger.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


class StructuredCallLogger:
    """Structured logger for outbound service calls."""

    def log_call(
        self,
        service: str,
        outcome: str,
        latency_ms: float,
        error_reason: str | None = None,
        **fields: Any,
    ) -> None:
        """Log an outbound call with structured data."""
        log_data: dict[str, Any] = {
            "service": service,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
            **fields,
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Upstream call: {service} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})

"""Logging configuration for the application."""

import logging
import sys
import uuid
from typing import Any, Literal, MutableMapping, Optional

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: LogLevel = "INFO") -> None:
    """Configure application logging.

    Call once at process start.

    Args:
        level: The logging level to use.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logging.getLogger(name)


class RequestLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that tags every message with a request ID."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        request_id = self.extra["request_id"] if self.extra else "-"
        return f"[request_id={request_id}] {msg}", kwargs


def get_request_logger(
    name: str, request_id: Optional[str] = None
) -> RequestLoggerAdapter:
    """Get a logger scoped to a single request.

    Args:
        name: The name for the underlying logger (typically __name__).
        request_id: ID to tag messages with; a new UUID4 if omitted.

    Returns:
        A RequestLoggerAdapter to pass down to the components serving
        the request.
    """
    return RequestLoggerAdapter(
        get_logger(name), {"request_id": request_id or str(uuid.uuid4())}
    )

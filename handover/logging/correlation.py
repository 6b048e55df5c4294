"""Request correlation ids carried in structlog contextvars."""

import uuid

import structlog

CORRELATION_HEADER = "X-Correlation-ID"


def new_correlation_id() -> str:
    """Generate a short request-scoped id."""
    return f"req_{uuid.uuid4().hex[:8]}"


def set_correlation_id(correlation_id: str, **extra: object) -> None:
    """Bind the correlation id (and any request context) for the current task."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id, **extra)


def get_correlation_id() -> str | None:
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from guard_clauses import GuardViolation
from guard_http.config import Settings
from guard_http.logging import get_logger, setup_logging
from guard_http.models import ErrorResponse, ViolationDetails

Handler = Callable[[Request, Exception], Awaitable[JSONResponse]]

GENERIC_MESSAGE = "Invalid argument"

_logger = get_logger(__name__)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    payload = ErrorResponse(
        error="Internal server error",
        code="INTERNAL_ERROR",
        details={"type": type(exc).__name__},
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))


def make_violation_handler(settings: Settings) -> Handler:
    """Build the handler that turns a GuardViolation into a client error response."""

    async def violation_handler(request: Request, exc: Exception) -> JSONResponse:
        if not isinstance(exc, GuardViolation):
            # Fallback: treat as unhandled
            return await unhandled_exception_handler(request, exc)
        _logger.warning(
            "guard violation on %s",
            request.url.path,
            extra={"guard": exc.guard, "label": exc.label},
        )
        details = ViolationDetails(guard=exc.guard, label=exc.label)
        payload = ErrorResponse(
            error=exc.message if settings.expose_messages else GENERIC_MESSAGE,
            code="INVALID_ARGUMENT",
            details=details.model_dump(),
            timestamp=datetime.now(timezone.utc),
        )
        return JSONResponse(
            status_code=settings.status_code, content=payload.model_dump(mode="json")
        )

    return violation_handler


def install_handlers(app: FastAPI, settings: Settings | None = None) -> Settings:
    """Register the violation handler on *app* and configure logging.

    Returns the settings in effect so callers can reuse them.
    """
    effective = settings if settings is not None else Settings.from_env()
    setup_logging(effective.log_level)
    app.add_exception_handler(GuardViolation, make_violation_handler(effective))
    return effective

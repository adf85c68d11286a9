"""Global exception handlers for consistent error responses.

Every error leaves the service as a short plain-text body with the proper
HTTP status code; the request id travels in the response headers added by
the request-id middleware.

Design:
- AppError subclasses → 500 with the error message
- Framework HTTPException (unknown route 404, explicit route errors) → its status
- Unexpected Exception → generic 500 (safety net)
"""

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import AppError
from app.core.logging import get_request_id

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> PlainTextResponse:
    """Handle domain application errors.

    Every domain error that reaches this handler is a server-side fault
    (the GitHub listing failed, or the catalog could not be built), so all
    of them map to 500 with their message as the body.

    Args:
        request: FastAPI request object.
        exc: AppError instance (or subclass).

    Returns:
        PlainTextResponse carrying the error message.
    """
    status_code = 500

    logger.warning(
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "error_message": exc.message,
            "status_code": status_code,
            "has_details": bool(exc.details),
            "request_id": get_request_id(),
        },
    )

    return PlainTextResponse(exc.message, status_code=status_code)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render framework HTTP errors (404 for unknown paths, etc.) as plain text."""
    logger.info(
        "http_error_handled",
        extra={
            "status_code": exc.status_code,
            "request_path": request.url.path,
            "request_method": request.method,
        },
    )
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Fallback handler for unexpected errors (safety net).

    Catches any exception not handled by specific handlers, for example a
    rate-limit backend that cannot be reached. Logs detailed information for
    debugging while returning a generic message (no stack traces to client).

    Args:
        request: FastAPI request object.
        exc: Exception instance (unexpected).

    Returns:
        PlainTextResponse with a generic 500 message.
    """
    logger.error(
        "unhandled_exception",
        extra={
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
            "request_path": request.url.path,
            "request_method": request.method,
            "request_id": get_request_id(),
        },
    )

    return PlainTextResponse("Internal Server Error", status_code=500)


def setup_exception_handlers(app) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance.

    Example:
        >>> from fastapi import FastAPI
        >>> from app.core.exception_handlers import setup_exception_handlers
        >>> app = FastAPI()
        >>> setup_exception_handlers(app)
    """
    app.exception_handler(AppError)(app_error_handler)
    app.exception_handler(StarletteHTTPException)(http_exception_handler)
    app.exception_handler(Exception)(general_exception_handler)

"""Exception handlers for the Slackline FastAPI application.

The bridge endpoint never reports relay failures to the poster, so these
handlers only cover faults of the service itself.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from api.models import ErrorResponse

logger = logging.getLogger(__name__)


async def runtime_error_handler(request: Request, exc: RuntimeError):
    """Handle RuntimeError exceptions.

    Raised when a request arrives before the relay is initialized, so the
    service is reported as unavailable.

    Args:
        request: The incoming request that triggered the error.
        exc: The RuntimeError exception.

    Returns:
        JSONResponse with 503 status.
    """
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=ErrorResponse(
            error="Service Unavailable",
            detail=str(exc),
            type="RuntimeError",
        ).model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    Logs the traceback and returns a generic body so internals are not
    exposed to clients.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        JSONResponse with 500 status.
    """
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal Server Error",
            detail="An unexpected error occurred",
            type=type(exc).__name__,
        ).model_dump(),
    )

"""
Error taxonomy for the booking API.

Every error carries the HTTP status and the message that is safe to show the
client. Handlers registered in ``register_error_handlers`` render them all as
``{"error": message}`` so routes stay thin.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

MSG_INTERNAL_ERROR = "Internal server error"


class BookingAPIError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    default_message = MSG_INTERNAL_ERROR

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BookingAPIError):
    """Missing or malformed request fields; user-correctable."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(BookingAPIError):
    """Referenced venue or record does not exist."""

    status_code = 404
    default_message = "Not found"


class PaymentProcessorError(BookingAPIError):
    """The payment processor rejected the request. Its message is relayed."""

    status_code = 400
    default_message = "Payment processor error"


class BookingConflictError(BookingAPIError):
    """The store refused the booking (e.g. a table was taken meanwhile)."""

    status_code = 409
    default_message = "Booking could not be completed"


class UpstreamError(BookingAPIError):
    """A store or processor call failed; detail stays in the server log."""

    status_code = 500


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def booking_error_handler(request: Request, exc: BookingAPIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path"))
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return _error_response(400, "; ".join(parts) or "Invalid request")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(500, MSG_INTERNAL_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to the app."""
    app.add_exception_handler(BookingAPIError, booking_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

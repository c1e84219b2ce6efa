"""
Translation of booking error kinds to HTTP responses.

NOT_FOUND is the only kind with its own status code. Every other kind,
including BAD_REQUEST and PAYMENT_REQUIRED, is answered with 403.

On the booking routes a body or path value that does not parse counts as a
missing field: it is answered as BAD_REQUEST (403), never 422.
"""

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import BadRequestError, BookingError, BookingErrorKind
from app.core.logging import get_logger

logger = get_logger(__name__)

BOOKING_PATH = "/booking"

STATUS_BY_KIND = {
    BookingErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def status_for(kind: BookingErrorKind) -> int:
    return STATUS_BY_KIND.get(kind, status.HTTP_403_FORBIDDEN)


def is_booking_route(path: str) -> bool:
    return path == BOOKING_PATH or path.startswith(BOOKING_PATH + "/")


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    status_code = status_for(exc.kind)
    logger.warning(
        "booking_error",
        kind=exc.kind.value,
        status_code=status_code,
        detail=exc.message,
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "kind": exc.kind.value},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    if not is_booking_route(request.url.path):
        return await request_validation_exception_handler(request, exc)

    logger.info("booking_request_malformed", errors=len(exc.errors()))
    return await booking_error_handler(request, BadRequestError("Malformed booking request"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingError, booking_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

"""
Error kinds raised by the booking service.

The service signals exactly one kind per failed call and never recovers from
it. Translation to HTTP status codes happens in app.api.errors.
"""

from enum import Enum
from typing import Optional


class BookingErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    FORBIDDEN = "forbidden"
    PAYMENT_REQUIRED = "payment_required"
    NOT_FOUND = "not_found"


class BookingError(Exception):
    kind: BookingErrorKind
    default_message: str = "Booking request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(BookingError):
    kind = BookingErrorKind.BAD_REQUEST
    default_message = "Missing required field"


class ForbiddenError(BookingError):
    kind = BookingErrorKind.FORBIDDEN
    default_message = "You don't have authorization to perform this booking action"


class PaymentRequiredError(BookingError):
    kind = BookingErrorKind.PAYMENT_REQUIRED
    default_message = "The request cannot be processed until the ticket is paid"


class NotFoundError(BookingError):
    kind = BookingErrorKind.NOT_FOUND
    default_message = "Resource not found"

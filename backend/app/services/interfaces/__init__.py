"""
Storage interfaces for dependency inversion.
The booking service only talks to these, so it runs against SQL in the app
and against in-memory fakes in tests.
"""

from .bookings import BookingRepository, DuplicateBookingError
from .rooms import RoomRepository
from .tickets import PaymentRepository, TicketRepository

__all__ = [
    'BookingRepository', 'DuplicateBookingError',
    'RoomRepository', 'PaymentRepository', 'TicketRepository',
]

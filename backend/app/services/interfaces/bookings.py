"""
Booking store interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.models.booking import Booking


class BookingRepository(ABC):

    @abstractmethod
    async def find_booking_by_user_id(self, user_id: int) -> Optional[Booking]:
        """Return the user's current booking with its room, or None."""
        pass

    @abstractmethod
    async def count_bookings_by_room_id(self, room_id: int) -> int:
        pass

    @abstractmethod
    async def create_booking(self, user_id: int, room_id: int) -> Booking:
        """
        Insert a booking.

        Raises:
            DuplicateBookingError: the user already holds a booking
        """
        pass

    @abstractmethod
    async def update_booking(self, booking: Booking, room_id: int) -> Booking:
        """Repoint an existing booking to another room."""
        pass


class DuplicateBookingError(Exception):
    """The store refused a second booking for the same user."""

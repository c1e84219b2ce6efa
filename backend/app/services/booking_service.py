"""
Booking eligibility service: who may view, create or change a hotel booking.

ELIGIBILITY
===========

  1. The user's first ticket must exist and its type must include hotel.
  2. That ticket must have a payment.
  3. Writes additionally need an existing room with a free slot.

  The read path reports an unpaid ticket as Forbidden. Create and change
  report it as PaymentRequired. Callers depend on this difference, keep it.

CAPACITY
========

  Counting a room's bookings and writing the new one happen inside
  RoomRepository.lock_room(), which serializes every create/change that
  targets the same room. Without it two requests for the last slot can both
  see a free slot and both write.

  On change, the user's own booking is not counted against the room it
  already occupies, so "change to my current room" always succeeds and never
  duplicates the booking.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from app.core.exceptions import (
    BadRequestError,
    BookingError,
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
)
from app.core.logging import get_logger
from app.core.metrics import booking_latency, record_booking_attempt
from app.models.booking import Booking
from app.models.ticket import Ticket
from app.services.interfaces import (
    BookingRepository,
    DuplicateBookingError,
    PaymentRepository,
    RoomRepository,
    TicketRepository,
)

logger = get_logger(__name__)


@asynccontextmanager
async def _instrumented(operation: str, **context):
    start = time.perf_counter()
    try:
        yield
    except BookingError as e:
        logger.info(
            "booking_rejected",
            operation=operation,
            kind=e.kind.value,
            reason=e.message,
            **context,
        )
        record_booking_attempt(operation, e.kind.value)
        raise
    else:
        record_booking_attempt(operation, "success")
    finally:
        booking_latency.labels(operation=operation).observe(time.perf_counter() - start)


class BookingService:

    def __init__(
        self,
        tickets: TicketRepository,
        payments: PaymentRepository,
        rooms: RoomRepository,
        bookings: BookingRepository,
    ):
        self.tickets = tickets
        self.payments = payments
        self.rooms = rooms
        self.bookings = bookings

    async def _find_hotel_ticket(self, user_id: int) -> Ticket:
        tickets = await self.tickets.find_tickets_by_user_id(user_id)
        if not tickets:
            raise ForbiddenError("User has no ticket")
        ticket = tickets[0]
        if not ticket.ticket_type.includes_hotel:
            raise ForbiddenError("Ticket does not include hotel accommodation")
        return ticket

    async def _is_paid(self, ticket: Ticket) -> bool:
        payment = await self.payments.find_payment_by_ticket_id(ticket.id)
        return payment is not None

    async def _require_paid_hotel_ticket(self, user_id: int) -> Ticket:
        ticket = await self._find_hotel_ticket(user_id)
        if not await self._is_paid(ticket):
            raise PaymentRequiredError()
        return ticket

    async def get_booking(self, user_id: int) -> Booking:
        """Return the user's booking with its room."""
        async with _instrumented("get", user_id=user_id):
            ticket = await self._find_hotel_ticket(user_id)
            if not await self._is_paid(ticket):
                raise ForbiddenError("Ticket has not been paid")

            booking = await self.bookings.find_booking_by_user_id(user_id)
            if booking is None:
                raise NotFoundError("User has no booking")
            return booking

    async def create_booking(self, user_id: int, room_id: Optional[int]) -> Booking:
        """
        Book a room for the user.

        Raises:
            BadRequestError: room_id missing
            ForbiddenError: no hotel ticket, room full, or user already booked
            PaymentRequiredError: ticket not paid
            NotFoundError: room does not exist
        """
        async with _instrumented("create", user_id=user_id, room_id=room_id):
            if room_id is None:
                raise BadRequestError("roomId is required")

            await self._require_paid_hotel_ticket(user_id)

            async with self.rooms.lock_room(room_id) as room:
                if room is None:
                    raise NotFoundError(f"Room {room_id} not found")

                occupied = await self.bookings.count_bookings_by_room_id(room_id)
                if occupied >= room.capacity:
                    raise ForbiddenError(f"Room {room_id} is full")

                if await self.bookings.find_booking_by_user_id(user_id) is not None:
                    raise ForbiddenError("User already has a booking")

                try:
                    booking = await self.bookings.create_booking(user_id, room_id)
                except DuplicateBookingError as e:
                    raise ForbiddenError("User already has a booking") from e

            logger.info(
                "booking_created",
                booking_id=booking.id,
                user_id=user_id,
                room_id=room_id,
                occupied=occupied + 1,
                capacity=room.capacity,
            )
            return booking

    async def change_booking(
        self,
        user_id: int,
        room_id: Optional[int],
        booking_id: Optional[int],
    ) -> Booking:
        """
        Move the user's booking to another room.

        booking_id must be the id of the user's own booking. The row updated
        is always the one resolved from user_id.
        """
        async with _instrumented("change", user_id=user_id, room_id=room_id, booking_id=booking_id):
            if room_id is None or booking_id is None:
                raise BadRequestError("roomId and bookingId are required")

            await self._require_paid_hotel_ticket(user_id)

            async with self.rooms.lock_room(room_id) as room:
                if room is None:
                    raise NotFoundError(f"Room {room_id} not found")

                booking = await self.bookings.find_booking_by_user_id(user_id)
                occupied = await self.bookings.count_bookings_by_room_id(room_id)
                if booking is not None and booking.room_id == room_id:
                    occupied -= 1
                if occupied >= room.capacity:
                    raise ForbiddenError(f"Room {room_id} is full")

                if booking is None:
                    raise ForbiddenError("User has no booking to change")
                if booking.id != booking_id:
                    raise ForbiddenError(f"Booking {booking_id} does not belong to user")

                previous_room_id = booking.room_id
                booking = await self.bookings.update_booking(booking, room_id)

            logger.info(
                "booking_changed",
                booking_id=booking.id,
                user_id=user_id,
                from_room_id=previous_room_id,
                to_room_id=room_id,
            )
            return booking

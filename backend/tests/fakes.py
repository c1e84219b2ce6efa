"""
In-memory implementations of the storage interfaces for service tests.

Every call yields to the event loop once so that concurrent service calls
interleave the way they would against a real database.
"""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import Optional

from app.models import Booking, Hotel, Payment, Room, Ticket, TicketStatus, TicketType
from app.services.booking_service import BookingService
from app.services.interfaces import (
    BookingRepository,
    DuplicateBookingError,
    PaymentRepository,
    RoomRepository,
    TicketRepository,
)


class InMemoryStore:
    """Shared tables behind the four fake repositories."""

    def __init__(self):
        self.tickets: list[Ticket] = []
        self.payments: list[Payment] = []
        self.rooms: dict[int, Room] = {}
        self.bookings: dict[int, Booking] = {}
        self._ids = defaultdict(int)

    def next_id(self, table: str) -> int:
        self._ids[table] += 1
        return self._ids[table]

    def add_ticket(self, user_id: int, includes_hotel: bool = True, paid: bool = True) -> Ticket:
        ticket_type = TicketType(
            id=self.next_id("ticket_types"),
            name="Presencial + Hotel" if includes_hotel else "Presencial",
            price=600 if includes_hotel else 250,
            is_remote=False,
            includes_hotel=includes_hotel,
        )
        ticket = Ticket(
            id=self.next_id("tickets"),
            user_id=user_id,
            ticket_type_id=ticket_type.id,
            status=TicketStatus.PAID if paid else TicketStatus.RESERVED,
        )
        ticket.ticket_type = ticket_type
        self.tickets.append(ticket)
        if paid:
            self.payments.append(Payment(
                id=self.next_id("payments"),
                ticket_id=ticket.id,
                value=ticket_type.price,
                card_issuer="VISA",
                card_last_digits="4242",
            ))
        return ticket

    def add_room(self, capacity: int) -> Room:
        hotel = Hotel(id=self.next_id("hotels"), name="Driven Resort", image="https://example.com/h.png")
        room = Room(id=self.next_id("rooms"), name=f"{100 + len(self.rooms)}", capacity=capacity, hotel_id=hotel.id)
        room.hotel = hotel
        self.rooms[room.id] = room
        return room

    def add_booking(self, user_id: int, room_id: int) -> Booking:
        booking = Booking(id=self.next_id("bookings"), user_id=user_id, room_id=room_id)
        booking.room = self.rooms.get(room_id)
        self.bookings[booking.id] = booking
        return booking

    def bookings_in_room(self, room_id: int) -> int:
        return sum(1 for b in self.bookings.values() if b.room_id == room_id)


class InMemoryTicketRepository(TicketRepository):

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_tickets_by_user_id(self, user_id: int):
        await asyncio.sleep(0)
        return [t for t in self.store.tickets if t.user_id == user_id]


class InMemoryPaymentRepository(PaymentRepository):

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_payment_by_ticket_id(self, ticket_id: int) -> Optional[Payment]:
        await asyncio.sleep(0)
        return next((p for p in self.store.payments if p.ticket_id == ticket_id), None)


class InMemoryRoomRepository(RoomRepository):

    def __init__(self, store: InMemoryStore, locking: bool = True):
        self.store = store
        self.locking = locking
        self._locks: dict[int, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def _fetch(self, room_id: int) -> Optional[Room]:
        await asyncio.sleep(0)
        return self.store.rooms.get(room_id)

    @asynccontextmanager
    async def lock_room(self, room_id: int):
        if not self.locking:
            yield await self._fetch(room_id)
            return
        async with self._locks[room_id]:
            yield await self._fetch(room_id)


class InMemoryBookingRepository(BookingRepository):

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_booking_by_user_id(self, user_id: int) -> Optional[Booking]:
        await asyncio.sleep(0)
        return next((b for b in self.store.bookings.values() if b.user_id == user_id), None)

    async def count_bookings_by_room_id(self, room_id: int) -> int:
        await asyncio.sleep(0)
        return self.store.bookings_in_room(room_id)

    async def create_booking(self, user_id: int, room_id: int) -> Booking:
        await asyncio.sleep(0)
        if any(b.user_id == user_id for b in self.store.bookings.values()):
            raise DuplicateBookingError(f"User {user_id} already has a booking")
        return self.store.add_booking(user_id, room_id)

    async def update_booking(self, booking: Booking, room_id: int) -> Booking:
        await asyncio.sleep(0)
        booking.room_id = room_id
        booking.room = self.store.rooms.get(room_id)
        return booking


def make_service(store: InMemoryStore, locking: bool = True) -> BookingService:
    return BookingService(
        tickets=InMemoryTicketRepository(store),
        payments=InMemoryPaymentRepository(store),
        rooms=InMemoryRoomRepository(store, locking=locking),
        bookings=InMemoryBookingRepository(store),
    )

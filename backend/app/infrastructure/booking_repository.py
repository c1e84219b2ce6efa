"""
SQLAlchemy booking store.
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.metrics import record_db_operation
from app.models.booking import Booking
from app.services.interfaces.bookings import BookingRepository, DuplicateBookingError


class SqlBookingRepository(BookingRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_booking_by_user_id(self, user_id: int) -> Optional[Booking]:
        record_db_operation("read")
        result = await self.db.execute(select(Booking).where(Booking.user_id == user_id))
        return result.scalar_one_or_none()

    async def count_bookings_by_room_id(self, room_id: int) -> int:
        record_db_operation("read")
        result = await self.db.execute(
            select(func.count()).select_from(Booking).where(Booking.room_id == room_id)
        )
        return result.scalar_one()

    async def create_booking(self, user_id: int, room_id: int) -> Booking:
        record_db_operation("write")
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        try:
            await self.db.flush()
        except IntegrityError as e:
            # Session is unusable from here on, get_db rolls the request back
            raise DuplicateBookingError(f"User {user_id} already has a booking") from e
        await self.db.refresh(booking)
        return booking

    async def update_booking(self, booking: Booking, room_id: int) -> Booking:
        record_db_operation("write")
        booking.room_id = room_id
        await self.db.flush()
        await self.db.refresh(booking)
        return booking

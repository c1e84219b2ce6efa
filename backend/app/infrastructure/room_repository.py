"""
SQLAlchemy room lookups.

CONCURRENCY STRATEGY: Pessimistic row lock on the room
======================================================

Problem:
  Room capacity is checked by counting bookings, then a booking is written.
  Two requests for the last free slot both count capacity - 1, both insert.
  Result: Overbooked room.

Solution:
  lock_room() reads the room with SELECT ... FOR UPDATE. Every other
  create/change targeting the same room blocks on that row until the
  holding transaction commits (get_db commits once per request), so the
  count it then performs already sees the committed booking.

  Only requests for the same room serialize. Rooms are small (a handful of
  slots) and contention is per room, so an optimistic version column would
  buy nothing here.

  SQLite ignores FOR UPDATE, it serializes writers at the database level.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.metrics import record_db_operation
from app.models.hotel import Room
from app.services.interfaces.rooms import RoomRepository


def lock_room_statement(room_id: int) -> Select:
    return select(Room).where(Room.id == room_id).with_for_update()


class SqlRoomRepository(RoomRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def lock_room(self, room_id: int) -> AsyncIterator[Optional[Room]]:
        record_db_operation("lock")
        result = await self.db.execute(lock_room_statement(room_id))
        # Lock is released by the request transaction, not by leaving the context
        yield result.scalar_one_or_none()

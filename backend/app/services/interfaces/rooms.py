"""
Room lookup interface.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Optional

from app.models.hotel import Room


class RoomRepository(ABC):
    """
    Implementations:
    - SqlRoomRepository: SELECT ... FOR UPDATE, lock held until commit
    - InMemoryRoomRepository (tests): per-room asyncio.Lock
    """

    @abstractmethod
    def lock_room(self, room_id: int) -> AbstractAsyncContextManager[Optional[Room]]:
        """
        Fetch a room and serialize every other lock_room() caller for the
        same room while the context is open.

        Capacity check and booking write must both happen inside the context
        for the room capacity to hold under concurrent requests.

        Yields:
            The room, or None if it does not exist
        """
        pass

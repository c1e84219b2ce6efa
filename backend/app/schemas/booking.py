"""
Pydantic schemas for booking-related request/response validation.

Wire format is camelCase (`roomId`, `bookingId`, `hotelId`). The booking body
embeds its room under `Room`.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class BookingRequest(CamelModel):
    # Optional on purpose: a missing roomId is a booking rule violation (403), not a 422
    room_id: Optional[int] = None


class BookingIdResponse(CamelModel):
    booking_id: int


class RoomResponse(CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class BookingResponse(CamelModel):
    id: int
    room: RoomResponse = Field(serialization_alias="Room")

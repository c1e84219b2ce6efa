"""
Booking endpoints: view, create and change the user's single hotel booking.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.api.dependencies import get_booking_service
from app.core.security import get_current_user_id
from app.schemas.booking import BookingIdResponse, BookingRequest, BookingResponse
from app.services.booking_service import BookingService

router = APIRouter(prefix="/booking", tags=["Booking"])


@router.get("", response_model=BookingResponse)
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Get the authenticated user's booking with its room."""
    return await service.get_booking(user_id)


@router.post("", response_model=BookingIdResponse)
async def create_booking(
    booking_data: Optional[BookingRequest] = None,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """
    Book a room.

    Requires a paid ticket that includes hotel and a room with a free slot.
    Concurrent requests for the same room are serialized on the room row.
    """
    room_id = booking_data.room_id if booking_data else None
    booking = await service.create_booking(user_id, room_id)
    return BookingIdResponse(booking_id=booking.id)


@router.put("/{booking_id}", response_model=BookingIdResponse)
async def change_booking(
    booking_id: int,
    booking_data: Optional[BookingRequest] = None,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Move the user's booking to another room."""
    room_id = booking_data.room_id if booking_data else None
    booking = await service.change_booking(user_id, room_id, booking_id)
    return BookingIdResponse(booking_id=booking.id)

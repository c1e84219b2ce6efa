"""
Request-scoped wiring of the booking service to the SQL repositories.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.infrastructure import (
    SqlBookingRepository,
    SqlPaymentRepository,
    SqlRoomRepository,
    SqlTicketRepository,
)
from app.services.booking_service import BookingService


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(
        tickets=SqlTicketRepository(db),
        payments=SqlPaymentRepository(db),
        rooms=SqlRoomRepository(db),
        bookings=SqlBookingRepository(db),
    )

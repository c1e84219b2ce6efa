"""
Infrastructure layer - SQLAlchemy implementations of the storage interfaces.
Keeps business logic clean from implementation details.
"""

from .booking_repository import SqlBookingRepository
from .room_repository import SqlRoomRepository
from .ticket_repository import SqlPaymentRepository, SqlTicketRepository

__all__ = [
    'SqlBookingRepository', 'SqlRoomRepository',
    'SqlPaymentRepository', 'SqlTicketRepository',
]

from app.models.user import User
from app.models.session import Session
from app.models.ticket import Ticket, TicketStatus, TicketType
from app.models.payment import Payment
from app.models.hotel import Hotel, Room
from app.models.booking import Booking

__all__ = [
    "User", "Session",
    "Ticket", "TicketStatus", "TicketType",
    "Payment", "Hotel", "Room", "Booking",
]

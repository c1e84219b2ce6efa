"""
Ticket and ticket type models.

Only the first ticket of a user is considered for hotel eligibility, and only
through its type's `includes_hotel` flag.
"""

import enum

from sqlalchemy import Column, Integer, String, Boolean, Enum, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class TicketStatus(str, enum.Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


class TicketType(Base, TimestampMixin):
    __tablename__ = "ticket_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    is_remote = Column(Boolean, nullable=False, default=False)
    includes_hotel = Column(Boolean, nullable=False, default=False)

    tickets = relationship("Ticket", back_populates="ticket_type")

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_ticket_type_price_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<TicketType(id={self.id}, name={self.name}, hotel={self.includes_hotel})>"


class Ticket(Base, TimestampMixin):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    ticket_type_id = Column(Integer, ForeignKey("ticket_types.id"), nullable=False)
    status = Column(Enum(TicketStatus, name="ticket_status"), nullable=False, default=TicketStatus.RESERVED)

    user = relationship("User", back_populates="tickets")
    # Eligibility checks always need the type, load it with the ticket
    ticket_type = relationship("TicketType", back_populates="tickets", lazy="joined")
    payments = relationship("Payment", back_populates="ticket")

    def __repr__(self) -> str:
        return f"<Ticket(id={self.id}, user={self.user_id}, status={self.status})>"

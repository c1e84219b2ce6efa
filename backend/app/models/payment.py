"""
Payment model. Existence of a row for a ticket is the only "paid" signal used.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class Payment(Base, TimestampMixin):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id"), nullable=False, index=True)
    value = Column(Integer, nullable=False)
    card_issuer = Column(String(50), nullable=False)
    card_last_digits = Column(String(4), nullable=False)

    ticket = relationship("Ticket", back_populates="payments")

    __table_args__ = (
        CheckConstraint("value >= 0", name="check_payment_value_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, ticket={self.ticket_id}, value={self.value})>"

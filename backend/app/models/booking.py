"""
Booking model: "this user currently occupies this room".

Key design decisions:
- Unique constraint on user_id: a user holds at most one booking
- room_id is indexed, capacity checks count bookings per room
- Changing rooms repoints room_id in place, the row id is stable
"""

from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)

    user = relationship("User", back_populates="booking")
    room = relationship("Room", back_populates="bookings", lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", name="uq_bookings_user_id"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_id}, room={self.room_id})>"

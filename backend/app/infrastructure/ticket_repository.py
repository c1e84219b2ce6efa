"""
SQLAlchemy ticket and payment lookups.
"""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.metrics import record_db_operation
from app.models.payment import Payment
from app.models.ticket import Ticket
from app.services.interfaces.tickets import PaymentRepository, TicketRepository


class SqlTicketRepository(TicketRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_tickets_by_user_id(self, user_id: int) -> Sequence[Ticket]:
        record_db_operation("read")
        result = await self.db.execute(
            select(Ticket).where(Ticket.user_id == user_id).order_by(Ticket.id.asc())
        )
        return list(result.scalars().all())


class SqlPaymentRepository(PaymentRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_payment_by_ticket_id(self, ticket_id: int) -> Optional[Payment]:
        record_db_operation("read")
        result = await self.db.execute(
            select(Payment).where(Payment.ticket_id == ticket_id).limit(1)
        )
        return result.scalar_one_or_none()

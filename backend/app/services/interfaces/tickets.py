"""
Ticket and payment lookup interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from app.models.payment import Payment
from app.models.ticket import Ticket


class TicketRepository(ABC):

    @abstractmethod
    async def find_tickets_by_user_id(self, user_id: int) -> Sequence[Ticket]:
        """
        Return the user's tickets, oldest first, each with its ticket type loaded.
        """
        pass


class PaymentRepository(ABC):

    @abstractmethod
    async def find_payment_by_ticket_id(self, ticket_id: int) -> Optional[Payment]:
        """Return the payment settling a ticket, or None if it is unpaid."""
        pass

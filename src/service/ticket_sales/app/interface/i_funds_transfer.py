"""
Funds Transfer Interface

The capability that moves money out of an event's collected balance. The
engine consumes it and never implements it.
"""

from abc import ABC, abstractmethod

from src.service.ticket_sales.domain.value_object.principal import Principal


class IFundsTransfer(ABC):
    @abstractmethod
    async def transfer(self, *, event_id: int, recipient: Principal, amount: int) -> bool:
        """
        Move `amount` from the event's collected balance to `recipient`

        Args:
            event_id: Event whose balance pays
            recipient: Buyer (refund, overpayment) or administrator (settlement)
            amount: Smallest currency unit, always > 0

        Returns:
            True if the transfer happened, False otherwise.
            Raising is treated the same as returning False.
        """
        pass

from typing import Protocol

from src.service.ticket_sales.domain.domain_event.ticket_sales_events import (
    TicketSalesNotification,
)


class INotificationSink(Protocol):
    """
    Receives EventCreated, TicketsPurchased, RefundIssued and SaleSettled

    Fire and forget: the engine logs and ignores anything publish() raises.
    """

    async def publish(self, *, notification: TicketSalesNotification) -> None: ...

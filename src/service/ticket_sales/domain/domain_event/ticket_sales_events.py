"""
Ticket Sales Notifications

Emitted by the engine after an operation has committed, in commit order per
event. Consumers receive them through an INotificationSink.
"""

from datetime import datetime, timezone
from typing import Any, Dict

import attrs

from src.service.ticket_sales.domain.value_object.principal import Principal


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@attrs.define(frozen=True)
class EventCreated:
    description: str
    website: str
    tickets_available: int
    event_id: int
    occurred_at: datetime = attrs.field(factory=_utc_now)

    @property
    def event_type(self) -> str:
        return 'event.created'

    def to_dict(self) -> Dict[str, Any]:
        return {'event_type': self.event_type, **attrs.asdict(self)}


@attrs.define(frozen=True)
class TicketsPurchased:
    buyer: Principal
    event_id: int
    num_tickets: int
    occurred_at: datetime = attrs.field(factory=_utc_now)

    @property
    def event_type(self) -> str:
        return 'tickets.purchased'

    def to_dict(self) -> Dict[str, Any]:
        return {'event_type': self.event_type, **attrs.asdict(self)}


@attrs.define(frozen=True)
class RefundIssued:
    buyer: Principal
    event_id: int
    num_tickets: int
    occurred_at: datetime = attrs.field(factory=_utc_now)

    @property
    def event_type(self) -> str:
        return 'refund.issued'

    def to_dict(self) -> Dict[str, Any]:
        return {'event_type': self.event_type, **attrs.asdict(self)}


@attrs.define(frozen=True)
class SaleSettled:
    administrator: Principal
    amount_transferred: int
    event_id: int
    occurred_at: datetime = attrs.field(factory=_utc_now)

    @property
    def event_type(self) -> str:
        return 'sale.settled'

    def to_dict(self) -> Dict[str, Any]:
        return {'event_type': self.event_type, **attrs.asdict(self)}


TicketSalesNotification = EventCreated | TicketsPurchased | RefundIssued | SaleSettled

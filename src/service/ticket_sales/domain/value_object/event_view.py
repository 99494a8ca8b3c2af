from typing import TYPE_CHECKING

import attrs


if TYPE_CHECKING:
    from src.service.ticket_sales.domain.entity.event_entity import Event


@attrs.define(frozen=True)
class EventView:
    """Read-only snapshot of an event handed to callers"""

    event_id: int
    description: str
    website: str
    total_tickets: int
    tickets_available: int
    sold: int
    is_open: bool

    @classmethod
    def from_event(cls, event: 'Event') -> 'EventView':
        return cls(
            event_id=event.id,
            description=event.description,
            website=event.website,
            total_tickets=event.total_tickets,
            tickets_available=event.tickets_available,
            sold=event.sold,
            is_open=event.is_open,
        )

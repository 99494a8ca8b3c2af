"""
Event Catalog - sole owner of every Event record

Ids are assigned sequentially from 0 and never reused; events are never
deleted, only closed. Callers read EventView snapshots. Writers take a working
copy with stage() and publish it back with commit().
"""

from typing import Dict, List

from src.platform.logging.loguru_io import Logger
from src.service.ticket_sales.domain.entity.event_entity import Event
from src.service.ticket_sales.domain.exception.ticket_sales_exceptions import EventNotFoundError
from src.service.ticket_sales.domain.validators import NumericValidators
from src.service.ticket_sales.domain.value_object.event_view import EventView
from src.service.ticket_sales.domain.value_object.principal import Principal


class EventCatalog:
    def __init__(self) -> None:
        self._events: Dict[int, Event] = {}
        self._next_id = 0

    @Logger.io
    def create_event(self, *, description: str, website: str, total_tickets: int) -> int:
        NumericValidators.validate_amount(total_tickets, 'Total tickets')
        event = Event.create(
            event_id=self._next_id,
            description=description,
            website=website,
            total_tickets=total_tickets,
        )
        self._events[event.id] = event
        self._next_id += 1
        Logger.base.info(f'🎫 [CATALOG] Created event {event.id} with {total_tickets} tickets')
        return event.id

    def _require(self, event_id: int) -> Event:
        event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    @Logger.io
    def get_event(self, *, event_id: int) -> EventView:
        return self._require(event_id).to_view()

    def get_buyer_ticket_count(self, *, event_id: int, buyer: Principal) -> int:
        return self._require(event_id).holdings.holdings_of(buyer)

    def list_events(self) -> List[EventView]:
        return [self._events[event_id].to_view() for event_id in sorted(self._events)]

    @Logger.io
    def close_event(self, *, event_id: int) -> None:
        self._require(event_id).close()

    def stage(self, event_id: int) -> Event:
        """Working copy of an event; nothing changes until commit()."""
        return self._require(event_id).copy()

    def commit(self, event: Event) -> None:
        self._require(event.id)
        event.check_invariants()
        touched = len(event.holdings.pending)
        event.holdings = event.holdings.merge()
        self._events[event.id] = event
        Logger.base.debug(f'📝 [CATALOG] Committed event {event.id} ({touched} holding change(s))')

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._events

    def __len__(self) -> int:
        return len(self._events)

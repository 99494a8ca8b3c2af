"""
Event - Aggregate Root for one ticketed offering

[Business Invariants]
- sold == sum of every buyer's holdings
- 0 <= sold <= total_tickets
- Before settlement, collected_funds == ticket_price * sold
- OPEN -> CLOSED happens once and is terminal

Mutations are applied to a working copy obtained through copy(); its holdings
are a fork that records only the buyers the operation touches. The catalog
swaps the copy in only after the operation's funds transfer succeeded.
"""

from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import LedgerInvariantError
from src.platform.logging.loguru_io import Logger
from src.service.ticket_sales.domain.enum.event_status import EventStatus
from src.service.ticket_sales.domain.validators import CheckedArithmetic, NumericValidators
from src.service.ticket_sales.domain.value_object.buyer_registry import BuyerRegistry
from src.service.ticket_sales.domain.value_object.event_view import EventView
from src.service.ticket_sales.domain.value_object.inventory_ledger import InventoryLedger
from src.service.ticket_sales.domain.value_object.principal import Principal


@attrs.define
class Event:
    id: int = attrs.field(validator=NumericValidators.validate_non_negative)
    description: str = attrs.field(validator=attrs.validators.instance_of(str))
    website: str = attrs.field(validator=attrs.validators.instance_of(str))
    inventory: InventoryLedger
    holdings: BuyerRegistry = attrs.field(factory=BuyerRegistry)
    status: EventStatus = attrs.field(
        default=EventStatus.OPEN, validator=attrs.validators.instance_of(EventStatus)
    )
    collected_funds: int = attrs.field(default=0, validator=NumericValidators.validate_non_negative)
    created_at: datetime = attrs.field(factory=lambda: datetime.now(timezone.utc))
    closed_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(cls, *, event_id: int, description: str, website: str, total_tickets: int) -> 'Event':
        return cls(
            id=event_id,
            description=description,
            website=website,
            inventory=InventoryLedger(total_tickets=total_tickets),
        )

    @property
    def is_open(self) -> bool:
        return self.status is EventStatus.OPEN

    @property
    def total_tickets(self) -> int:
        return self.inventory.total_tickets

    @property
    def sold(self) -> int:
        return self.inventory.sold

    @property
    def tickets_available(self) -> int:
        return self.inventory.remaining

    def can_sell(self, num_tickets: int) -> bool:
        return self.is_open and self.inventory.has_capacity(num_tickets)

    def apply_purchase(self, *, buyer: Principal, num_tickets: int, cost: int) -> None:
        self.holdings.credit(buyer, num_tickets)
        self.inventory.record_sale(num_tickets)
        self.collected_funds = CheckedArithmetic.add(self.collected_funds, cost)

    def apply_refund(self, *, buyer: Principal) -> int:
        """Clear the buyer's holdings, return them to inventory and the count cleared."""
        cleared = self.holdings.clear(buyer)
        self.inventory.record_refund(cleared)
        return cleared

    def withdraw(self, amount: int) -> None:
        self.collected_funds = CheckedArithmetic.sub(self.collected_funds, amount)

    def close(self) -> None:
        if not self.is_open:
            return
        self.status = EventStatus.CLOSED
        self.closed_at = datetime.now(timezone.utc)

    def check_invariants(self) -> None:
        held = self.holdings.total()
        if held != self.sold:
            raise LedgerInvariantError(
                f'Event {self.id}: sold ({self.sold}) != sum of holdings ({held})'
            )

    def copy(self) -> 'Event':
        return attrs.evolve(
            self, inventory=self.inventory.copy(), holdings=self.holdings.fork()
        )

    def to_view(self) -> EventView:
        return EventView.from_event(self)

"""
Inventory Ledger - ticket counters of a single event

[Invariant]
- 0 <= sold <= total_tickets at every observable point

[Boundary policy]
- Selling exactly the last remaining ticket is allowed; a request is rejected
  only when it asks for more than what remains.
"""

import attrs

from src.platform.exception.exceptions import LedgerInvariantError
from src.service.ticket_sales.domain.validators import NumericValidators


@attrs.define
class InventoryLedger:
    total_tickets: int = attrs.field(
        validator=NumericValidators.validate_non_negative, on_setattr=attrs.setters.frozen
    )
    sold: int = attrs.field(default=0, validator=NumericValidators.validate_non_negative)

    def __attrs_post_init__(self) -> None:
        if self.sold > self.total_tickets:
            raise LedgerInvariantError(
                f'sold ({self.sold}) cannot exceed total_tickets ({self.total_tickets})'
            )

    @property
    def remaining(self) -> int:
        return self.total_tickets - self.sold

    def has_capacity(self, num_tickets: int) -> bool:
        return num_tickets <= self.remaining

    def record_sale(self, num_tickets: int) -> None:
        if not self.has_capacity(num_tickets):
            raise LedgerInvariantError(
                f'Sale of {num_tickets} would push sold past total_tickets '
                f'({self.sold}/{self.total_tickets})'
            )
        self.sold += num_tickets

    def record_refund(self, num_tickets: int) -> None:
        if num_tickets > self.sold:
            raise LedgerInvariantError(
                f'Refund of {num_tickets} would push sold below zero (sold={self.sold})'
            )
        self.sold -= num_tickets

    def copy(self) -> 'InventoryLedger':
        return attrs.evolve(self)

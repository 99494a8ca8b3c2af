"""
Buyer Registry - per-event mapping of buyer principal to tickets held

Holdings only grow through credit() and only shrink through clear(), which
always empties a buyer's holdings in one step.

A working registry from fork() reads through to its base and records only the
buyers it touches; forking never walks the base.
merge() writes those entries back into the base.
"""

from typing import Dict, Iterator, Optional, Tuple

import attrs

from src.service.ticket_sales.domain.validators import CheckedArithmetic, NumericValidators
from src.service.ticket_sales.domain.value_object.principal import Principal


@attrs.define
class BuyerRegistry:
    _holdings: Dict[Principal, int] = attrs.field(factory=dict, alias='holdings')
    _base: Optional['BuyerRegistry'] = attrs.field(default=None, alias='base')
    _total: int = attrs.field(init=False, default=0)

    def __attrs_post_init__(self) -> None:
        self._total = self._base.total() if self._base is not None else 0
        for buyer, held in self._holdings.items():
            below = self._base.holdings_of(buyer) if self._base is not None else 0
            self._total += held - below

    def holdings_of(self, buyer: Principal) -> int:
        if buyer in self._holdings:
            return self._holdings[buyer]
        if self._base is not None:
            return self._base.holdings_of(buyer)
        return 0

    def credit(self, buyer: Principal, num_tickets: int) -> int:
        NumericValidators.validate_amount(num_tickets, 'Ticket count')
        new_total = CheckedArithmetic.add(self.holdings_of(buyer), num_tickets)
        new_sum = CheckedArithmetic.add(self._total, num_tickets)
        self._holdings[buyer] = new_total
        self._total = new_sum
        return new_total

    def clear(self, buyer: Principal) -> int:
        """Reset the buyer's holdings to 0 and return what they held."""
        previous = self.holdings_of(buyer)
        if self._base is None:
            self._holdings.pop(buyer, None)
        else:
            # 0 masks the base entry until merge()
            self._holdings[buyer] = 0
        self._total -= previous
        return previous

    def total(self) -> int:
        return self._total

    @property
    def pending(self) -> Tuple[Principal, ...]:
        """Buyers touched since fork(); empty for a registry with no base."""
        if self._base is None:
            return ()
        return tuple(self._holdings)

    def _merged(self) -> Dict[Principal, int]:
        merged = self._base._merged() if self._base is not None else {}
        merged.update(self._holdings)
        return merged

    def buyers(self) -> Iterator[Principal]:
        return iter([buyer for buyer, held in self._merged().items() if held])

    def fork(self) -> 'BuyerRegistry':
        return BuyerRegistry(base=self)

    def merge(self) -> 'BuyerRegistry':
        """Apply this fork's entries to its base and return the base."""
        base = self._base
        if base is None:
            return self
        for buyer, held in self._holdings.items():
            if held or base._base is not None:
                base._holdings[buyer] = held
            else:
                base._holdings.pop(buyer, None)
        base._total = self._total
        self._holdings = {}
        return base

    def __len__(self) -> int:
        return sum(1 for _ in self.buyers())

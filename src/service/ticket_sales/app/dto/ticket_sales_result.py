import attrs

from src.service.ticket_sales.domain.value_object.principal import Principal


@attrs.define(frozen=True)
class PurchaseResult:
    event_id: int
    buyer: Principal
    num_tickets: int
    cost: int
    overpayment: int
    holdings: int


@attrs.define(frozen=True)
class RefundResult:
    event_id: int
    buyer: Principal
    num_tickets: int
    refund_value: int


@attrs.define(frozen=True)
class SettleResult:
    event_id: int
    administrator: Principal
    amount_transferred: int

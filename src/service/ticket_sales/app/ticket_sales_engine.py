"""
Ticket Sales Engine - orchestrates purchase, refund and settlement

Every write rejects unknown event ids up front, so no lock is ever created
for them, then follows the same flow while holding the event's lock:
1. Validate against the committed record (first failure wins, starting with
   the open/closed status)
2. Apply the mutations to a staged copy from the catalog
3. Attempt the funds transfer, if the operation moves money
4. Commit the staged copy and emit the notification only if the transfer
   succeeded; otherwise drop the copy, leaving the exact pre-call state

Refunds deliberately skip the open/closed check: a buyer can still get their
money back after close as long as the event holds the funds.
"""

from typing import List

from src.platform.exception.exceptions import LedgerInvariantError
from src.platform.logging.loguru_io import Logger
from src.platform.state.event_lock import EventLockRegistry
from src.service.ticket_sales.app.dto.ticket_sales_result import (
    PurchaseResult,
    RefundResult,
    SettleResult,
)
from src.service.ticket_sales.app.interface.i_funds_transfer import IFundsTransfer
from src.service.ticket_sales.app.interface.i_notification_sink import INotificationSink
from src.service.ticket_sales.domain.domain_event.ticket_sales_events import (
    EventCreated,
    RefundIssued,
    SaleSettled,
    TicketSalesNotification,
    TicketsPurchased,
)
from src.service.ticket_sales.domain.event_catalog import EventCatalog
from src.service.ticket_sales.domain.exception.ticket_sales_exceptions import (
    EventClosedError,
    EventNotFoundError,
    InsufficientInventoryError,
    InsufficientPaymentError,
    NoHoldingsError,
    TransferFailedError,
    UnauthorizedError,
)
from src.service.ticket_sales.domain.validators import (
    BusinessRuleValidators,
    CheckedArithmetic,
    NumericValidators,
)
from src.service.ticket_sales.domain.value_object.event_view import EventView
from src.service.ticket_sales.domain.value_object.principal import Principal


class TicketSalesEngine:
    def __init__(
        self,
        *,
        catalog: EventCatalog,
        lock_registry: EventLockRegistry,
        funds_transfer: IFundsTransfer,
        notification_sink: INotificationSink,
        administrator: Principal,
        ticket_price: int,
    ) -> None:
        NumericValidators.validate_amount(ticket_price, 'Ticket price')
        if ticket_price == 0:
            raise ValueError('Ticket price must be over 0')
        self.catalog = catalog
        self.lock_registry = lock_registry
        self.funds_transfer = funds_transfer
        self.notification_sink = notification_sink
        self.administrator = administrator
        self.ticket_price = ticket_price

    def _require_administrator(self, caller: Principal, action: str) -> None:
        if caller != self.administrator:
            raise UnauthorizedError(f'Only the administrator can {action}')

    def _require_known_event(self, event_id: int) -> None:
        if event_id not in self.catalog:
            raise EventNotFoundError(event_id)

    def price_for(self, num_tickets: int) -> int:
        return CheckedArithmetic.mul(self.ticket_price, num_tickets)

    async def _transfer(self, *, event_id: int, recipient: Principal, amount: int) -> None:
        try:
            succeeded = await self.funds_transfer.transfer(
                event_id=event_id, recipient=recipient, amount=amount
            )
        except Exception as e:
            Logger.base.warning(
                f'💸 [TRANSFER] {amount} to {recipient} for event {event_id} raised: {e!r}'
            )
            raise TransferFailedError(
                f'Transfer of {amount} to {recipient} for event {event_id} failed'
            ) from e
        if not succeeded:
            Logger.base.warning(f'💸 [TRANSFER] {amount} to {recipient} for event {event_id} rejected')
            raise TransferFailedError(
                f'Transfer of {amount} to {recipient} for event {event_id} failed'
            )

    async def _emit(self, notification: TicketSalesNotification) -> None:
        try:
            await self.notification_sink.publish(notification=notification)
        except Exception:
            Logger.base.exception(f'📡 [NOTIFY] Failed to publish {notification.event_type}')

    @Logger.io
    async def create_event(
        self, *, caller: Principal, description: str, website: str, total_tickets: int
    ) -> int:
        self._require_administrator(caller, 'create events')
        event_id = self.catalog.create_event(
            description=description, website=website, total_tickets=total_tickets
        )
        await self._emit(
            EventCreated(
                description=description,
                website=website,
                tickets_available=total_tickets,
                event_id=event_id,
            )
        )
        return event_id

    def get_event(self, *, event_id: int) -> EventView:
        return self.catalog.get_event(event_id=event_id)

    def list_events(self) -> List[EventView]:
        return self.catalog.list_events()

    def get_buyer_ticket_count(self, *, event_id: int, buyer: Principal) -> int:
        return self.catalog.get_buyer_ticket_count(event_id=event_id, buyer=buyer)

    @Logger.io
    async def purchase(
        self, *, event_id: int, buyer: Principal, num_tickets: int, paid_amount: int
    ) -> PurchaseResult:
        self._require_known_event(event_id)
        async with self.lock_registry.hold(event_id):
            staged = self.catalog.stage(event_id)
            if not staged.is_open:
                raise EventClosedError(event_id)

            BusinessRuleValidators.validate_ticket_count(num_tickets)
            NumericValidators.validate_amount(paid_amount, 'Paid amount')

            cost = self.price_for(num_tickets)
            if paid_amount < cost:
                raise InsufficientPaymentError(required=cost, paid=paid_amount)

            if not staged.can_sell(num_tickets):
                raise InsufficientInventoryError(
                    requested=num_tickets, remaining=staged.tickets_available
                )

            staged.apply_purchase(buyer=buyer, num_tickets=num_tickets, cost=cost)

            overpayment = paid_amount - cost
            if overpayment > 0:
                await self._transfer(event_id=event_id, recipient=buyer, amount=overpayment)

            self.catalog.commit(staged)
            Logger.base.info(
                f'🎟️ [PURCHASE] {buyer} bought {num_tickets} for event {event_id} '
                f'(cost={cost}, overpayment={overpayment}, sold={staged.sold}/{staged.total_tickets})'
            )
            await self._emit(
                TicketsPurchased(buyer=buyer, event_id=event_id, num_tickets=num_tickets)
            )

        return PurchaseResult(
            event_id=event_id,
            buyer=buyer,
            num_tickets=num_tickets,
            cost=cost,
            overpayment=overpayment,
            holdings=staged.holdings.holdings_of(buyer),
        )

    @Logger.io
    async def refund(self, *, event_id: int, buyer: Principal) -> RefundResult:
        self._require_known_event(event_id)
        async with self.lock_registry.hold(event_id):
            staged = self.catalog.stage(event_id)
            if staged.holdings.holdings_of(buyer) <= 0:
                raise NoHoldingsError(event_id)

            cleared = staged.apply_refund(buyer=buyer)
            refund_value = self.price_for(cleared)
            if refund_value > staged.collected_funds:
                raise TransferFailedError(
                    f'Event {event_id} holds {staged.collected_funds}, cannot refund {refund_value}'
                )
            staged.withdraw(refund_value)

            await self._transfer(event_id=event_id, recipient=buyer, amount=refund_value)

            self.catalog.commit(staged)
            Logger.base.info(
                f'↩️ [REFUND] {buyer} returned {cleared} for event {event_id} (value={refund_value})'
            )
            await self._emit(RefundIssued(buyer=buyer, event_id=event_id, num_tickets=cleared))

        return RefundResult(
            event_id=event_id, buyer=buyer, num_tickets=cleared, refund_value=refund_value
        )

    @Logger.io
    async def settle(self, *, event_id: int, caller: Principal) -> SettleResult:
        self._require_administrator(caller, 'settle an event')
        self._require_known_event(event_id)
        async with self.lock_registry.hold(event_id):
            staged = self.catalog.stage(event_id)
            if not staged.is_open:
                raise EventClosedError(event_id)

            amount = staged.collected_funds
            expected = self.price_for(staged.sold)
            if amount != expected:
                raise LedgerInvariantError(
                    f'Event {event_id} holds {amount} but {staged.sold} sold tickets are worth {expected}'
                )

            staged.close()
            staged.withdraw(amount)
            if amount > 0:
                await self._transfer(event_id=event_id, recipient=self.administrator, amount=amount)

            self.catalog.commit(staged)
            Logger.base.info(f'🏁 [SETTLE] Event {event_id} closed, {amount} paid out')
            await self._emit(
                SaleSettled(
                    administrator=self.administrator, amount_transferred=amount, event_id=event_id
                )
            )

        return SettleResult(event_id=event_id, administrator=self.administrator, amount_transferred=amount)

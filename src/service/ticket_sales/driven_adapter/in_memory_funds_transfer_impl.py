"""
In-memory Funds Transfer

IFundsTransfer implementation for local runs and tests. Records every
successful payout and can be told to reject specific recipients or every
transfer, which is how callers exercise rollback paths.
"""

from typing import List, Set

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticket_sales.app.interface.i_funds_transfer import IFundsTransfer
from src.service.ticket_sales.domain.value_object.principal import Principal


@attrs.define(frozen=True)
class TransferRecord:
    event_id: int
    recipient: Principal
    amount: int


class InMemoryFundsTransferImpl(IFundsTransfer):
    def __init__(self) -> None:
        self.records: List[TransferRecord] = []
        self.rejected_recipients: Set[Principal] = set()
        self.fail_all = False

    def reject(self, recipient: Principal) -> None:
        self.rejected_recipients.add(recipient)

    def accept(self, recipient: Principal) -> None:
        self.rejected_recipients.discard(recipient)

    async def transfer(self, *, event_id: int, recipient: Principal, amount: int) -> bool:
        if self.fail_all or recipient in self.rejected_recipients:
            Logger.base.info(f'💸 [MOCK TRANSFER] Rejected {amount} to {recipient}')
            return False
        self.records.append(TransferRecord(event_id=event_id, recipient=recipient, amount=amount))
        return True

    def total_paid_to(self, recipient: Principal) -> int:
        return sum(r.amount for r in self.records if r.recipient == recipient)

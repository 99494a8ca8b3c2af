"""
Test Configuration and Fixtures

Environment variables are set before any application module is imported,
because settings and the loguru sinks are built at import time.

Fixtures wire a fresh engine per test around in-memory collaborators:
- funds_transfer: InMemoryFundsTransferImpl (records payouts, can reject)
- broadcaster: InMemoryNotificationBroadcasterImpl (keeps a bounded ordered history)
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('LOG_TO_FILE', 'false')
    os.environ.setdefault('DEBUG', 'true')
    os.environ.setdefault('TICKET_PRICE', '100')
    os.environ.setdefault('ADMINISTRATOR_ID', 'administrator')


_early_setup_test_environment()

import pytest  # noqa: E402

from src.platform.state.event_lock import EventLockRegistry  # noqa: E402
from src.service.ticket_sales.app.ticket_sales_engine import TicketSalesEngine  # noqa: E402
from src.service.ticket_sales.domain.event_catalog import EventCatalog  # noqa: E402
from src.service.ticket_sales.driven_adapter.in_memory_funds_transfer_impl import (  # noqa: E402
    InMemoryFundsTransferImpl,
)
from src.service.ticket_sales.driven_adapter.in_memory_notification_broadcaster_impl import (  # noqa: E402
    InMemoryNotificationBroadcasterImpl,
)


@pytest.fixture
def administrator() -> str:
    return 'administrator'


@pytest.fixture
def ticket_price() -> int:
    return 100


@pytest.fixture
def catalog() -> EventCatalog:
    return EventCatalog()


@pytest.fixture
def lock_registry() -> EventLockRegistry:
    return EventLockRegistry()


@pytest.fixture
def funds_transfer() -> InMemoryFundsTransferImpl:
    return InMemoryFundsTransferImpl()


@pytest.fixture
def broadcaster() -> InMemoryNotificationBroadcasterImpl:
    return InMemoryNotificationBroadcasterImpl(max_buffer_size=10)


@pytest.fixture
def engine(
    catalog: EventCatalog,
    lock_registry: EventLockRegistry,
    funds_transfer: InMemoryFundsTransferImpl,
    broadcaster: InMemoryNotificationBroadcasterImpl,
    administrator: str,
    ticket_price: int,
) -> TicketSalesEngine:
    return TicketSalesEngine(
        catalog=catalog,
        lock_registry=lock_registry,
        funds_transfer=funds_transfer,
        notification_sink=broadcaster,
        administrator=administrator,
        ticket_price=ticket_price,
    )


def assert_ledger_consistent(catalog: EventCatalog, event_id: int, buyers: list) -> None:
    view = catalog.get_event(event_id=event_id)
    held = sum(catalog.get_buyer_ticket_count(event_id=event_id, buyer=b) for b in buyers)
    assert view.sold == held
    assert 0 <= view.sold <= view.total_tickets
    assert view.tickets_available == view.total_tickets - view.sold


@pytest.fixture
def ledger_check():
    """Assert sold == sum(holdings) and 0 <= sold <= total for the given buyers"""
    return assert_ledger_consistent

"""
https://python-dependency-injector.ets-labs.org/index.html

The funds-transfer capability belongs to the host application. Override it
before resolving the engine:

    container = Container()
    container.funds_transfer.override(providers.Object(my_transfer))
    engine = container.ticket_sales_engine()
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.state.event_lock import EventLockRegistry
from src.service.ticket_sales.app.interface.i_funds_transfer import IFundsTransfer
from src.service.ticket_sales.app.ticket_sales_engine import TicketSalesEngine
from src.service.ticket_sales.domain.event_catalog import EventCatalog
from src.service.ticket_sales.driven_adapter.in_memory_notification_broadcaster_impl import (
    InMemoryNotificationBroadcasterImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # State
    event_catalog = providers.Singleton(EventCatalog)
    event_lock_registry = providers.Singleton(EventLockRegistry)

    # External collaborators
    funds_transfer = providers.Dependency(instance_of=IFundsTransfer)
    notification_broadcaster = providers.Singleton(
        InMemoryNotificationBroadcasterImpl,
        max_buffer_size=config_service.provided.NOTIFICATION_BUFFER_SIZE,
        history_size=config_service.provided.NOTIFICATION_HISTORY_SIZE,
    )

    # Engine
    ticket_sales_engine = providers.Singleton(
        TicketSalesEngine,
        catalog=event_catalog,
        lock_registry=event_lock_registry,
        funds_transfer=funds_transfer,
        notification_sink=notification_broadcaster,
        administrator=config_service.provided.ADMINISTRATOR_ID,
        ticket_price=config_service.provided.TICKET_PRICE,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()

"""
In-memory Notification Broadcaster

INotificationSink implementation that fans ticket sales notifications out to
per-event subscribers within the same process, and keeps a bounded, ordered
history.

Memory Management:
- Stream max buffer: NOTIFICATION_BUFFER_SIZE notifications per subscriber
- History: the last NOTIFICATION_HISTORY_SIZE notifications across all events
- Drop policy: drop for that subscriber if its stream is full
- Cleanup: remove empty subscriber lists on unsubscribe and close streams
"""

from collections import deque
from typing import Deque, Dict, List, Tuple

from anyio import BrokenResourceError, WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from src.platform.logging.loguru_io import Logger
from src.service.ticket_sales.domain.domain_event.ticket_sales_events import (
    TicketSalesNotification,
)


_Subscriber = Tuple[
    MemoryObjectSendStream[TicketSalesNotification],
    MemoryObjectReceiveStream[TicketSalesNotification],
]


class InMemoryNotificationBroadcasterImpl:
    def __init__(self, *, max_buffer_size: int = 10, history_size: int = 1000) -> None:
        self.max_buffer_size = max_buffer_size
        self.history_size = history_size
        # event_id -> list of (send_stream, receive_stream) tuples
        self._subscribers: Dict[int, List[_Subscriber]] = {}
        # Oldest entries fall off once history_size is reached
        self._history: Deque[TicketSalesNotification] = deque(maxlen=history_size)

    @property
    def history(self) -> List[TicketSalesNotification]:
        return list(self._history)

    def history_for(self, event_id: int) -> List[TicketSalesNotification]:
        return [n for n in self._history if n.event_id == event_id]

    async def subscribe(self, *, event_id: int) -> MemoryObjectReceiveStream[TicketSalesNotification]:
        send_stream, receive_stream = create_memory_object_stream[TicketSalesNotification](
            max_buffer_size=self.max_buffer_size
        )
        self._subscribers.setdefault(event_id, []).append((send_stream, receive_stream))

        Logger.base.debug(
            f'📡 [BROADCASTER] Subscribed to event {event_id} '
            f'(total subscribers: {len(self._subscribers[event_id])})'
        )
        return receive_stream

    async def publish(self, *, notification: TicketSalesNotification) -> None:
        self._history.append(notification)

        subscribers = self._subscribers.get(notification.event_id)
        if not subscribers:
            Logger.base.debug(f'📡 [BROADCASTER] No subscribers for event {notification.event_id}')
            return

        delivered = 0
        dropped = 0
        for send_stream, _ in subscribers:
            try:
                send_stream.send_nowait(notification)
                delivered += 1
            except (WouldBlock, BrokenResourceError):
                dropped += 1
                Logger.base.warning(
                    f'⚠️ [BROADCASTER] Stream unavailable for event {notification.event_id}, '
                    f'dropping {notification.event_type}'
                )

        Logger.base.info(
            f'📡 [BROADCASTER] {notification.event_type} to event {notification.event_id}: '
            f'delivered={delivered}, dropped={dropped}'
        )

    async def unsubscribe(
        self, *, event_id: int, stream: MemoryObjectReceiveStream[TicketSalesNotification]
    ) -> None:
        """Safe to call with an unknown event_id or stream."""
        subscribers = self._subscribers.get(event_id)
        if subscribers is None:
            return

        for i, (send_stream, receive_stream) in enumerate(subscribers):
            if receive_stream is stream:
                await send_stream.aclose()
                await receive_stream.aclose()
                subscribers.pop(i)
                break

        if not subscribers:
            del self._subscribers[event_id]
            Logger.base.debug(f'📡 [BROADCASTER] Cleaned up empty list for event {event_id}')

    def subscriber_count(self, event_id: int) -> int:
        return len(self._subscribers.get(event_id, []))

"""
Per-event mutual exclusion

One anyio.Lock per event id. Purchase, refund and settlement hold the lock of
their event for the whole operation, transfer attempt included, so calls
against the same event never interleave while different events proceed in
parallel.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

import anyio

from src.platform.config.business_config import LockKeyFormat
from src.platform.logging.loguru_io import Logger


class EventLockRegistry:
    def __init__(self) -> None:
        self._locks: Dict[int, anyio.Lock] = {}

    @staticmethod
    def key_for(event_id: int) -> str:
        return f'{LockKeyFormat.PREFIX}:{event_id}'

    def lock_for(self, event_id: int) -> anyio.Lock:
        # No await between lookup and insert, so two tasks cannot create two locks
        lock = self._locks.get(event_id)
        if lock is None:
            lock = self._locks[event_id] = anyio.Lock()
        return lock

    def is_locked(self, event_id: int) -> bool:
        lock = self._locks.get(event_id)
        return lock is not None and lock.locked()

    @asynccontextmanager
    async def hold(self, event_id: int) -> AsyncIterator[None]:
        key = self.key_for(event_id)
        async with self.lock_for(event_id):
            Logger.base.debug(f'🔒 [LOCK] Acquired lock: {key}')
            try:
                yield
            finally:
                Logger.base.debug(f'🔓 [LOCK] Released lock: {key}')

    def __len__(self) -> int:
        return len(self._locks)

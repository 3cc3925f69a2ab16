"""Per-thread mutual exclusion for the reply pipeline."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List


class ThreadLocks:
    """
    One asyncio.Lock per thread id.

    Replies to the same thread run one at a time; replies to different
    threads never wait on each other. A lock is dropped once nobody holds
    or waits for it.
    """

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, thread_id: str) -> AsyncIterator[None]:
        """Hold the lock for ``thread_id`` for the duration of the block."""
        lock = self._locks.get(thread_id)
        if lock is None:
            lock = self._locks[thread_id] = asyncio.Lock()
        self._users[thread_id] = self._users.get(thread_id, 0) + 1

        try:
            async with lock:
                yield
        finally:
            self._users[thread_id] -= 1
            if self._users[thread_id] == 0:
                del self._users[thread_id]
                del self._locks[thread_id]

    def is_locked(self, thread_id: str) -> bool:
        lock = self._locks.get(thread_id)
        return lock is not None and lock.locked()

    def active_threads(self) -> List[str]:
        return list(self._locks.keys())

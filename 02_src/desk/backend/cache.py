"""Request-keyed roster cache with in-flight deduplication."""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Hashable, Protocol

from ..config import ROSTER_DEDUP_SECONDS

Fetcher = Callable[[], Awaitable[Any]]


class IRosterCache(Protocol):
    """Shares roster fetches between screens of one session."""

    async def get(self, key: Hashable, fetcher: Fetcher) -> Any:
        """Cached value if fresh, else fetch (joining an in-flight request)."""
        ...

    async def revalidate(self, key: Hashable, fetcher: Fetcher) -> Any:
        """Always issue one fresh fetch and store its result."""
        ...

    def invalidate(self, key: Hashable) -> None:
        """Drop one cached value."""
        ...

    def discard(self, predicate: Callable[[Hashable], bool]) -> None:
        """Drop every cached value whose key matches `predicate`."""
        ...


@dataclass
class _Entry:
    value: Any
    fetched_at: float
    generation: int


class RosterCache:
    """In-memory cache keyed by request, e.g. (access token, roster path).

    A value fetched less than `dedup_seconds` ago is served without a new
    request. Concurrent `get` calls for the same key share one request.
    Failed fetches are never stored.

    Each `revalidate` starts a new generation for its key. A fetch from an
    older generation never overwrites a newer value; its callers receive
    the newer value instead.
    """

    def __init__(
        self,
        dedup_seconds: float = ROSTER_DEDUP_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._dedup_seconds = dedup_seconds
        self._clock = clock
        self._entries: dict[Hashable, _Entry] = {}
        self._inflight: dict[Hashable, asyncio.Task] = {}
        self._generations: dict[Hashable, int] = {}

    async def get(self, key: Hashable, fetcher: Fetcher) -> Any:
        entry = self._entries.get(key)
        if entry and self._clock() - entry.fetched_at < self._dedup_seconds:
            return entry.value

        task = self._inflight.get(key)
        if task:
            return await asyncio.shield(task)
        return await self._fetch(key, fetcher)

    async def revalidate(self, key: Hashable, fetcher: Fetcher) -> Any:
        # Requests already in flight may predate a mutation.
        self._generations[key] = self._generations.get(key, 0) + 1
        return await self._fetch(key, fetcher)

    def generation(self, key: Hashable) -> int:
        return self._generations.get(key, 0)

    def invalidate(self, key: Hashable) -> None:
        self._entries.pop(key, None)

    def discard(self, predicate: Callable[[Hashable], bool]) -> None:
        """Drop every cached value whose key matches `predicate`."""
        for key in [k for k in self._entries if predicate(k)]:
            del self._entries[key]
        for key in [k for k in self._generations if predicate(k)]:
            del self._generations[key]

    def clear(self) -> None:
        self._entries.clear()
        self._generations.clear()

    async def _fetch(self, key: Hashable, fetcher: Fetcher) -> Any:
        task = asyncio.ensure_future(self._run(key, fetcher, self.generation(key)))
        self._inflight[key] = task
        try:
            return await asyncio.shield(task)
        finally:
            if self._inflight.get(key) is task:
                del self._inflight[key]

    async def _run(self, key: Hashable, fetcher: Fetcher, generation: int) -> Any:
        value = await fetcher()
        if generation == self.generation(key):
            self._entries[key] = _Entry(
                value=value, fetched_at=self._clock(), generation=generation
            )
            return value

        # superseded by a revalidation
        entry = self._entries.get(key)
        if entry is not None and entry.generation > generation:
            return entry.value
        newer = self._inflight.get(key)
        if newer is not None and newer is not asyncio.current_task():
            return await asyncio.shield(newer)
        return value

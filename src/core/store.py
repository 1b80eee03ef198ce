"""In-memory key-value store with per-entry TTL and a hard size ceiling.

Expired entries are invisible to every read. They are removed lazily when
a read trips over them and periodically by a background sweep task. Once
max_size distinct keys are held, new keys are rejected; existing keys can
always be overwritten.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import math
import time
from typing import Any, Callable, Dict, List, Optional

from core.errors import QuotaExceededError, ValidationError
from core.keys import validate_key
from core.models import StoreEntry
from core.patterns import filter_keys
from core.serialization import ensure_serializable

logger = logging.getLogger(__name__)


class TTLStore:
    # Implements core.interfaces.KeyValueStore
    def __init__(
        self,
        *,
        max_size: int = 10_000,
        sweep_interval_seconds: float = 60.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if int(max_size) <= 0:
            raise ValidationError("max_size must be positive")
        if float(sweep_interval_seconds) <= 0:
            raise ValidationError("sweep_interval_seconds must be positive")

        self._max_size = int(max_size)
        self._sweep_interval = float(sweep_interval_seconds)
        self._clock = clock
        self._entries: Dict[str, StoreEntry] = {}

        # One lock for foreground calls and the sweep task.
        self._lock = asyncio.Lock()
        self._sweep_task: Optional[asyncio.Task[None]] = None

    @property
    def max_size(self) -> int:
        return self._max_size

    async def __aenter__(self) -> "TTLStore":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        task = self._sweep_task
        self.destroy()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    def start(self) -> None:
        """Start the background sweep on the running event loop (idempotent)."""
        if self._sweep_task is not None and not self._sweep_task.done():
            return
        self._sweep_task = asyncio.get_running_loop().create_task(
            self._sweep_forever(), name="ttl-store-sweep"
        )
        logger.debug("Started expiry sweep every %.1fs", self._sweep_interval)

    def destroy(self) -> None:
        """Cancel the background sweep. The store stays usable; idempotent."""
        task, self._sweep_task = self._sweep_task, None
        if task is not None and not task.done():
            task.cancel()
            logger.debug("Stopped expiry sweep")

    @property
    def sweeping(self) -> bool:
        return self._sweep_task is not None and not self._sweep_task.done()

    async def get(self, key: str) -> Optional[Any]:
        entry = await self.get_entry(key)
        return None if entry is None else entry.value

    async def get_entry(self, key: str) -> Optional[StoreEntry]:
        validate_key(key)
        async with self._lock:
            return self._live_entry(key)

    async def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        validate_key(key)
        ensure_serializable(value)
        if ttl_seconds is not None and not (math.isfinite(float(ttl_seconds)) and float(ttl_seconds) >= 0):
            raise ValidationError("ttl_seconds must be a finite, non-negative number")

        async with self._lock:
            now = self._clock()
            previous = self._entries.get(key)

            # An expired leftover does not count as an existing key.
            if previous is not None and previous.is_expired(now):
                del self._entries[key]
                previous = None

            if previous is None and len(self._entries) >= self._max_size:
                # Make sure expired entries are not what fills the store.
                self._purge_expired(now)
                if len(self._entries) >= self._max_size:
                    raise QuotaExceededError(self._max_size)

            self._entries[key] = StoreEntry(
                value=value,
                created_at=previous.created_at if previous is not None else now,
                updated_at=now,
                expires_at=None if ttl_seconds is None else now + float(ttl_seconds),
            )

    async def delete(self, key: str) -> bool:
        # Expired entries count as absent: they are dropped but report False.
        validate_key(key)
        async with self._lock:
            if self._live_entry(key) is None:
                return False
            del self._entries[key]
            return True

    async def has(self, key: str) -> bool:
        validate_key(key)
        async with self._lock:
            return self._live_entry(key) is not None

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()

    async def keys(self, pattern: Optional[str] = None) -> List[str]:
        async with self._lock:
            self._purge_expired(self._clock())
            return filter_keys(self._entries, pattern)

    async def size(self) -> int:
        async with self._lock:
            self._purge_expired(self._clock())
            return len(self._entries)

    async def sweep(self) -> int:
        """Remove every expired entry now and return how many were dropped."""
        async with self._lock:
            return self._purge_expired(self._clock())

    def _live_entry(self, key: str) -> Optional[StoreEntry]:
        # Caller holds the lock.
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            return None
        return entry

    def _purge_expired(self, now: float) -> int:
        # Caller holds the lock.
        expired = [k for k, e in self._entries.items() if e.is_expired(now)]
        for k in expired:
            del self._entries[k]
        return len(expired)

    async def _sweep_forever(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval)
            removed = await self.sweep()
            if removed:
                logger.debug("Expiry sweep removed %d entries", removed)

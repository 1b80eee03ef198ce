"""Factory for constructing the process-wide store.

The server bootstrap is the only caller: it builds one store here and
hands it to the tools that need it. Nothing else should construct or
reach a store on its own.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from config import STORE_MAX_SIZE, STORE_SWEEP_INTERVAL
from core.store import TTLStore


def create_store(
    *,
    max_size: Optional[int] = None,
    sweep_interval_seconds: Optional[float] = None,
    clock: Callable[[], float] = time.time,
) -> TTLStore:
    """
    Build a TTLStore, filling unset options from config.

    The sweeper is not running yet: enter the store (async with) or call
    start() from inside the event loop that will own it.
    """
    return TTLStore(
        max_size=STORE_MAX_SIZE if max_size is None else max_size,
        sweep_interval_seconds=STORE_SWEEP_INTERVAL if sweep_interval_seconds is None else sweep_interval_seconds,
        clock=clock,
    )

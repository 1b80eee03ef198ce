"""Immutable record types held by the store.

StoreEntry keeps the value together with wall-clock timestamps (epoch
seconds) so callers can inspect when an entry was created, last written
and when it stops being visible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class StoreEntry:
    """One stored value.

    Fields:
    - value: the stored value (owned by the store once written)
    - created_at: first insertion of the key, kept across updates
    - updated_at: refreshed on every write
    - expires_at: absolute expiry; None means the entry never expires
    """

    value: Any
    created_at: float
    updated_at: float
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and self.expires_at <= now

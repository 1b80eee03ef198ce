"""Core protocol definitions.

Defines the KeyValueStore protocol: the narrow contract the tools (and
any other caller) depend on, independent of the backing implementation.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol


class KeyValueStore(Protocol):
    """Contract for any key-value backend (in-memory today)."""
    async def get(self, key: str) -> Optional[Any]:
        ...

    async def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        ...

    async def delete(self, key: str) -> bool:
        ...

    async def has(self, key: str) -> bool:
        ...

    async def clear(self) -> None:
        ...

    async def keys(self, pattern: Optional[str] = None) -> List[str]:
        ...

    async def size(self) -> int:
        ...

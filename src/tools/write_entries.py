"""MCP tools that modify the key-value store.

Registers 'kv_set', 'kv_delete' and 'kv_clear'.
"""

from __future__ import annotations

from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from core.interfaces import KeyValueStore


def register(mcp: FastMCP, *, store: KeyValueStore) -> None:
    @mcp.tool(name="kv_set")
    async def kv_set(key: str, value: Any, ttl_seconds: Optional[float] = None) -> str:
        """Store a JSON-safe value under key.

        Params:
          - key: letters, digits, '_', '-', ':' or '.', at most 250 chars.
          - value: any JSON value.
          - ttl_seconds: optional lifetime; omitted means no expiry.

        Returns:
          "OK" on success.

        Raises:
          InvalidKeyError, SerializationError, ValidationError (negative TTL)
          or QuotaExceededError when the store is full and the key is new.
        """
        await store.set(key, value, ttl_seconds)
        return "OK"

    @mcp.tool(name="kv_delete")
    async def kv_delete(key: str) -> bool:
        """Delete key; returns True only if a live entry was removed."""
        return await store.delete(key)

    @mcp.tool(name="kv_clear")
    async def kv_clear() -> str:
        """Remove every entry from the store."""
        await store.clear()
        return "OK"

"""MCP tools that read from the key-value store.

Registers 'kv_get', 'kv_has', 'list_keys' and 'kv_size'. The store is
injected by the server bootstrap; these tools never create one.
"""

from __future__ import annotations

from typing import Any, List, Optional

from mcp.server.fastmcp import FastMCP

from core.interfaces import KeyValueStore
from core.keys import namespaced_key


def register(mcp: FastMCP, *, store: KeyValueStore) -> None:
    @mcp.tool(name="kv_get")
    async def kv_get(key: str) -> Optional[Any]:
        """Return the value stored under key, or null if absent or expired.

        Raises:
          InvalidKeyError if the key is malformed.
        """
        return await store.get(key)

    @mcp.tool(name="kv_has")
    async def kv_has(key: str) -> bool:
        """Return whether a live (unexpired) entry exists for key."""
        return await store.has(key)

    @mcp.tool(name="list_keys")
    async def list_keys(pattern: Optional[str] = None, namespace: Optional[str] = None) -> List[str]:
        """List live keys, sorted.

        Params:
          - pattern: glob with '*' and '?' wildcards, matched against the
            whole key, or against the part after "namespace:" when
            namespace is given (default: all keys).
          - namespace: optional namespace; the key must start with
            "namespace:" and the wildcards in pattern only apply to the part
            after it (e.g. namespace="prd" lists "prd:*", and
            namespace="prd", pattern="1?" lists "prd:1x" but not "prd:x:1x").

        Returns:
          Sorted list of keys.
        """
        if namespace:
            pattern = namespaced_key(namespace, pattern or "*")
        return sorted(await store.keys(pattern))

    @mcp.tool(name="kv_size")
    async def kv_size() -> int:
        """Return the number of live entries."""
        return await store.size()

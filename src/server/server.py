"""Server bootstrap for the TTL key-value MCP service.

Creates the store through the factory, creates the FastMCP instance with a
lifespan that owns the store's background sweep, registers the tools and
starts the MCP server (stdio transport).
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import FastMCP

from config import LOG_LEVEL
from core.log import setup_logging
from stores.store_factory import create_store

from tools.read_entries import register as register_read_entries
from tools.write_entries import register as register_write_entries

store = create_store()


@asynccontextmanager
async def store_lifespan(server: FastMCP) -> AsyncIterator[None]:
    # Sweep runs only while the server is up
    async with store:
        yield


mcp = FastMCP("ttl-store-mcp", lifespan=store_lifespan)


def register_tools() -> None:
    register_read_entries(mcp, store=store)
    register_write_entries(mcp, store=store)


register_tools()


def main() -> None:
    setup_logging(LOG_LEVEL)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()

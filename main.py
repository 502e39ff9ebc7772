# =============================================================================
# main.py  —  Entry Point for the Anytype MCP Server
# =============================================================================
#
# HOW TO RUN:
#   ANYTYPE_API_KEY=... uv run python main.py
#
#   or register it with an MCP client (Claude Desktop, an ADK agent, ...)
#   as a stdio server:
#
#     {"command": "anytype-mcp-lite", "env": {"ANYTYPE_API_KEY": "..."}}
#
# WHAT HAPPENS:
#   1. Loads a .env file, if present, into the environment
#   2. Builds the client configuration (core/config.py)
#   3. Creates the FastMCP server with the search and get-object tools
#   4. Serves MCP over stdin/stdout until the client disconnects, then
#      closes the Anytype HTTP client
#
#   The Anytype desktop app must be running; its local API listens on
#   http://127.0.0.1:31009 unless ANYTYPE_API_SERVER says otherwise.
# =============================================================================

import asyncio
import logging
import sys

from dotenv import load_dotenv

from core.anytype import Anytype
from core.config import AnytypeConfig, ConfigError

logger = logging.getLogger("anytype-mcp")


async def _serve(server, client: Anytype) -> None:
    # The client outlives every MCP session and is closed only here.
    try:
        await server.run_async()
    finally:
        await client.aclose()


def main() -> None:
    # Must happen before the config is read, so .env values are visible.
    load_dotenv()

    from tools.mcp_server import create_server

    try:
        config = AnytypeConfig.from_env()
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.info("Connecting to Anytype API at %s", config.api_server)
    client = Anytype(config)
    server = create_server(client)
    asyncio.run(_serve(server, client))


if __name__ == "__main__":
    main()

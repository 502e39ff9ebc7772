# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (search + get-object)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the MCP server that exposes Anytype to an agent.  Each tool is a
#   thin wrapper around an adapter in tools/adapters.py: it logs the call,
#   runs the adapter, and turns its Ok/Err outcome into an MCP result.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g., "get-object")
#   2. FastMCP validates the arguments and routes to the function below
#   3. The function calls the adapter, which calls core/anytype.py
#   4. Ok  → the result dataclass is returned as structured content
#      Err → a ToolError carrying Err.message is raised; FastMCP builds
#            its own isError=True result with that text as the only item,
#            the same shape as Err.result
#
# TOOLS (all read-only):
#   search      Full-text search across spaces, one page per call
#   get-object  One object's markdown and its text/date properties
#
# RUNNING THIS SERVER:
#   Use main.py (or the anytype-mcp-lite script).  It reads the API key
#   from the environment and serves over stdio.
# =============================================================================

import json
import logging
import os
import sys
from dataclasses import asdict
from typing import Annotated, Any, Mapping, NoReturn, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core.anytype import Anytype
from tools import adapters
from tools.schemas import GetObjectResult, SearchResult

SERVER_NAME = "anytype"
SERVER_VERSION = "0.1.2"
SERVER_INSTRUCTIONS = (
    "Provide read-only access to Anytype workspace. "
    "Help user to retrieve information from their Anytype."
)

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP JSON stream, so logs go to STDERR.
#
#   CYAN    incoming tool calls (name + parameters)
#   GREEN   successful responses
#   YELLOW  status messages
#   RED     failures returned to the agent
#
# ANYTYPE_MCP_LOG_LEVEL picks the level by name (DEBUG, INFO, ...).  An
# unknown name falls back to INFO instead of failing the import.
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"


def _log_level(environ: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if environ is None else environ
    level = logging.getLevelName(env.get("ANYTYPE_MCP_LOG_LEVEL", "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    level=_log_level(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def _log_request(tool_name: str, **params: Any) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: Any) -> Any:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(asdict(result), separators=(',', ':'))}{_RESET}")
    return result


def _raise_error(tool_name: str, outcome: adapters.Err) -> NoReturn:
    """Log a failed call in RED and hand the rendered message to FastMCP."""
    logger.warning(
        f"{_RED}  ✗ {tool_name} failed ({type(outcome.error).__name__}): {outcome.message}{_RESET}"
    )
    raise ToolError(outcome.message) from outcome.error


# =============================================================================
# Server factory
# =============================================================================
def create_server(client: Anytype) -> FastMCP:
    """Create the Anytype MCP server.

    Args:
        client: The shared API client.  Every session and every concurrent
            tool call uses it.  The server never closes it; whoever built
            it closes it once the server has stopped (see main.py).
    """
    mcp = FastMCP(
        SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        version=SERVER_VERSION,
    )

    # =========================================================================
    # TOOL 1: search
    # =========================================================================
    @mcp.tool(name="search", description="search objects in anytype")
    async def search(
        query: Annotated[str, Field(description="the search query")],
        offset: Annotated[int, Field(description="the offset for pagination")] = 0,
    ) -> SearchResult:
        """Search objects across all spaces.

        Returns one page of hits (id, space_id, name and type name for each)
        plus the total count and the offset of this page.  Call again with a
        larger offset for the next page.
        """
        _log_request("search", query=query, offset=offset)

        outcome = await adapters.search(client, query, offset)
        if isinstance(outcome, adapters.Err):
            _raise_error("search", outcome)

        _log_status(f"Found {len(outcome.value.data)} of {outcome.value.pagination.total} objects")
        return _log_response("search", outcome.value)

    # =========================================================================
    # TOOL 2: get-object
    # =========================================================================
    @mcp.tool(name="get-object", description="get an object from anytype")
    async def get_object(
        objectId: Annotated[str, Field(description="the id of the object to get")],
        spaceId: Annotated[str, Field(description="the space id of the object to get")],
    ) -> GetObjectResult:
        """Get one object's markdown content and its text and date properties."""
        _log_request("get-object", objectId=objectId, spaceId=spaceId)

        outcome = await adapters.get_object(client, objectId, spaceId)
        if isinstance(outcome, adapters.Err):
            _raise_error("get-object", outcome)

        _log_status(f"Kept {len(outcome.value.properties)} readable properties")
        return _log_response("get-object", outcome.value)

    return mcp

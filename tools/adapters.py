# =============================================================================
# tools/adapters.py  —  Tool Adapters (API results → tool results)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   The two operations an agent can call, independent of any MCP server:
#
#     search(client, query, offset)          → Ok(SearchResult)   | Err
#     get_object(client, object_id, space_id) → Ok(GetObjectResult) | Err
#
# THE RESULT TYPE:
#   Every call returns exactly one of:
#     Ok(value)            the reshaped payload
#     Err(result, error)   the failure rendered as an MCP error result
#                          (isError=True, one text item) plus the original
#                          exception.  Callers that speak MCP directly can
#                          return Err.result as is.  The FastMCP server in
#                          tools/mcp_server.py raises ToolError(Err.message)
#                          instead, and FastMCP renders an equivalent result.
#
# PROPERTY POLICY:
#   get_object only exposes properties whose format is in READABLE_FORMATS.
#   Everything else (number, checkbox, url, email, phone, select, and any
#   format the server adds later) is dropped, never partially rendered.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from mcp.types import CallToolResult, TextContent

from core.anytype import Anytype
from core.models import Object
from core.models import Property as ApiProperty
from tools.schemas import GetObjectResult, Pagination, Property, SearchItem, SearchResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Property formats whose value the tools expose.
READABLE_FORMATS = frozenset({"text", "date"})


# =============================================================================
# Result type
# =============================================================================
@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    result: CallToolResult
    error: Exception

    @property
    def message(self) -> str:
        return self.result.content[0].text

    @classmethod
    def from_exception(cls, error: Exception) -> "Err":
        text = str(error) or type(error).__name__
        return cls(
            result=CallToolResult(
                content=[TextContent(type="text", text=text)],
                isError=True,
            ),
            error=error,
        )


ToolOutcome = Union[Ok[T], Err]


# =============================================================================
# search
# =============================================================================
def to_search_item(obj: Object) -> SearchItem:
    return SearchItem(id=obj.id, space_id=obj.space_id, name=obj.name, type=obj.type.name)


async def search(client: Anytype, query: str, offset: int = 0) -> ToolOutcome[SearchResult]:
    """Search objects and project each hit down to id/space/name/type name."""
    try:
        found = await client.search(query, offset)
    except Exception as e:
        logger.debug("search(%r, offset=%d) failed: %s", query, offset, e)
        return Err.from_exception(e)

    return Ok(SearchResult(
        data=[to_search_item(obj) for obj in found.data],
        pagination=Pagination(total=found.pagination.total, offset=found.pagination.offset),
    ))


# =============================================================================
# get-object
# =============================================================================
def readable_properties(properties: list[ApiProperty]) -> list[Property]:
    """Keep text and date properties, in order, with their value filled in."""
    readable = []
    for prop in properties:
        if prop.format not in READABLE_FORMATS:
            continue
        value = prop.date if prop.format == "date" else prop.text
        readable.append(Property(name=prop.name, format=prop.format, value=value))
    return readable


async def get_object(client: Anytype, object_id: str, space_id: str) -> ToolOutcome[GetObjectResult]:
    """Fetch one object and return its markdown plus readable properties."""
    try:
        found = await client.get_object(space_id, object_id)
    except Exception as e:
        logger.debug("get_object(%r, %r) failed: %s", space_id, object_id, e)
        return Err.from_exception(e)

    obj = found.object
    return Ok(GetObjectResult(
        objectId=obj.id,
        spaceId=obj.space_id,
        markdown=obj.markdown,
        properties=readable_properties(obj.properties),
    ))

# =============================================================================
# tools/schemas.py  —  Tool-Facing Result Shapes
# =============================================================================
#
# These are the shapes an agent sees, NOT the API's own models.  They are
# deliberately narrower than core/models.py:
#
#   SearchItem       carries the type's display NAME, not the whole type
#   GetObjectResult  carries markdown plus allow-listed properties only
#   Property         name / format / value, nothing else
#
# FastMCP turns these dataclasses into each tool's output schema, so the
# field names below are the JSON keys the agent receives.
# =============================================================================

from dataclasses import dataclass, field


@dataclass
class Pagination:
    total: int = 0      # Total number of matching objects
    offset: int = 0     # Offset that produced this page


@dataclass
class SearchItem:
    id: str
    space_id: str
    name: str
    type: str           # Display name of the object type, e.g. "Note"


@dataclass
class SearchResult:
    """One page of search hits."""

    data: list[SearchItem] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)


@dataclass
class Property:
    name: str
    format: str         # "text" or "date"
    value: str


@dataclass
class GetObjectResult:
    """An object's content and its readable properties.

    Keys follow the tool's parameter names (objectId/spaceId).
    """

    objectId: str
    spaceId: str
    markdown: str
    properties: list[Property] = field(default_factory=list)

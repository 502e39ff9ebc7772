# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the Anytype API)
# =============================================================================
#
# These dataclasses mirror the JSON the local Anytype API returns.  They are
# a read-only view: the bridge never builds or sends an Object back.
#
# DECODING RULES:
#   Each model has a from_dict() classmethod that accepts the decoded JSON.
#     - Missing keys and nulls become zero values ("" / 0 / [] / empty type).
#     - Unknown keys are ignored, so new server fields never break decoding.
#     - A value of the wrong JSON type raises ResponseDecodeError.
#
#   Property.format is an open string.  The server may introduce new
#   formats at any time; only the tools layer decides which ones to expose.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any

from core.errors import ResponseDecodeError


# -----------------------------------------------------------------------------
# Decoding helpers
# -----------------------------------------------------------------------------
def _record(data: Any, what: str) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ResponseDecodeError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _string(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ResponseDecodeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _integer(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ResponseDecodeError(f"field {key!r} must be an integer, got {type(value).__name__}")
    return value


def _array(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResponseDecodeError(f"field {key!r} must be an array, got {type(value).__name__}")
    return value


# -----------------------------------------------------------------------------
# ObjectType: what kind of object this is (Note, Page, Task, ...)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ObjectType:
    id: str = ""
    key: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ObjectType":
        data = _record(data, "type")
        return cls(id=_string(data, "id"), key=_string(data, "key"), name=_string(data, "name"))


# -----------------------------------------------------------------------------
# Property: one typed attribute of an object
# -----------------------------------------------------------------------------
# Only the "text" and "date" value slots are decoded.  Properties of other
# formats still decode (id/key/name/format) but carry no value here.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Property:
    id: str = ""
    key: str = ""
    name: str = ""
    format: str = ""
    text: str = ""
    date: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Property":
        data = _record(data, "property")
        return cls(
            id=_string(data, "id"),
            key=_string(data, "key"),
            name=_string(data, "name"),
            format=_string(data, "format"),
            text=_string(data, "text"),
            date=_string(data, "date"),
        )


@dataclass(frozen=True)
class Pagination:
    """Total result count and the offset that produced the current page."""

    total: int = 0
    offset: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "Pagination":
        data = _record(data, "pagination")
        return cls(total=_integer(data, "total"), offset=_integer(data, "offset"))


# -----------------------------------------------------------------------------
# Object: a knowledge-base record inside a space
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Object:
    """An Anytype object as returned by the search and get-object endpoints.

    ``markdown`` is only populated by get-object; search results leave it
    empty.
    """

    id: str = ""
    space_id: str = ""
    name: str = ""
    markdown: str = ""
    type: ObjectType = field(default_factory=ObjectType)
    properties: list[Property] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Object":
        data = _record(data, "object")
        return cls(
            id=_string(data, "id"),
            space_id=_string(data, "space_id"),
            name=_string(data, "name"),
            markdown=_string(data, "markdown"),
            type=ObjectType.from_dict(data.get("type")),
            properties=[Property.from_dict(p) for p in _array(data, "properties")],
        )


# -----------------------------------------------------------------------------
# Response envelopes
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GetObjectOutput:
    """Body of ``GET /v1/spaces/{space_id}/objects/{object_id}``."""

    object: Object = field(default_factory=Object)

    @classmethod
    def from_dict(cls, data: Any) -> "GetObjectOutput":
        if not isinstance(data, dict):
            raise ResponseDecodeError(f"response must be a JSON object, got {type(data).__name__}")
        return cls(object=Object.from_dict(data.get("object")))


@dataclass(frozen=True)
class SearchOutput:
    """Body of ``POST /v1/search``: one page of objects plus pagination."""

    data: list[Object] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)

    @classmethod
    def from_dict(cls, data: Any) -> "SearchOutput":
        if not isinstance(data, dict):
            raise ResponseDecodeError(f"response must be a JSON object, got {type(data).__name__}")
        return cls(
            data=[Object.from_dict(o) for o in _array(data, "data")],
            pagination=Pagination.from_dict(data.get("pagination")),
        )

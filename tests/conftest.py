"""Shared fixtures for the Anytype MCP tests.

The local Anytype API is faked with ``httpx.MockTransport`` slotted in
underneath ``AnytypeTransport`` (see tests/fakes/fake_anytype.py).
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from core.anytype import Anytype
from core.config import AnytypeConfig
from tests.fakes.fake_anytype import FakeAnytypeServer

TEST_API_KEY = "test-api-key"
TEST_API_SERVER = "http://anytype.test"


@pytest.fixture
def test_config() -> AnytypeConfig:
    return AnytypeConfig(api_key=TEST_API_KEY, api_server=TEST_API_SERVER)


@pytest.fixture
def make_client(test_config: AnytypeConfig) -> Callable[[FakeAnytypeServer], Anytype]:
    """Build a client whose requests are answered by the given fake server."""

    def _make(server: FakeAnytypeServer) -> Anytype:
        return Anytype(test_config, transport=httpx.MockTransport(server))

    return _make


@pytest.fixture
def sample_object() -> dict:
    """A get-object response body with one property of each common format."""
    return {
        "object": {
            "id": "obj789",
            "space_id": "space101",
            "name": "Complex Object",
            "markdown": "# Title\n\nThis is markdown content.",
            "type": {"id": "type2", "key": "page", "name": "Page"},
            "properties": [
                {"id": "prop1", "key": "description", "name": "Description", "format": "text", "text": "Sample description"},
                {"id": "prop2", "key": "created_date", "name": "Created Date", "format": "date", "date": "2023-01-15"},
                {"id": "prop3", "key": "count", "name": "Count", "format": "number", "number": 42},
                {"id": "prop4", "key": "done", "name": "Done", "format": "checkbox", "checkbox": True},
                {"id": "prop5", "key": "source", "name": "Source", "format": "url", "url": "https://example.com"},
                {"id": "prop6", "key": "notes", "name": "Notes", "format": "text", "text": "Second text"},
            ],
        }
    }


@pytest.fixture
def sample_search() -> dict:
    """A search response body with two hits."""
    return {
        "data": [
            {
                "id": "obj1",
                "space_id": "space1",
                "name": "Meeting Notes",
                "type": {"id": "type1", "key": "note", "name": "Note"},
            },
            {
                "id": "obj2",
                "space_id": "space2",
                "name": "Untyped",
                "type": {"id": "", "key": "", "name": ""},
            },
        ],
        "pagination": {"total": 25, "offset": 10},
    }

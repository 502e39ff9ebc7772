# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains the Anytype API client: configuration, the wire
# models, the error model and the authenticated HTTP client.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or knows about tools.  It only
#   depends on httpx, so it can be used (and tested) on its own.
# =============================================================================

from core.anytype import API_VERSION, Anytype, AnytypeTransport
from core.config import AnytypeConfig, ConfigError
from core.errors import AnytypeError, ResponseDecodeError

__all__ = [
    "API_VERSION",
    "Anytype",
    "AnytypeConfig",
    "AnytypeError",
    "AnytypeTransport",
    "ConfigError",
    "ResponseDecodeError",
]

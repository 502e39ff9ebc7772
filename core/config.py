# =============================================================================
# core/config.py  —  Client Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the immutable settings the API client needs: the API key, the
#   base URL of the local Anytype server, and the per-request timeout.
#
# ENVIRONMENT VARIABLES (read by AnytypeConfig.from_env):
#   ANYTYPE_API_KEY     Required.  Created in Anytype under
#                       Settings → API Keys.
#   ANYTYPE_API_SERVER  Optional.  Defaults to the desktop app's local
#                       API address, http://127.0.0.1:31009.
#   ANYTYPE_TIMEOUT     Optional.  Seconds before a single request is
#                       abandoned (default 30).
#
#   main.py loads a .env file first, so these can live there too.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_SERVER = "http://127.0.0.1:31009"
DEFAULT_TIMEOUT = 30.0


class ConfigError(ValueError):
    """Raised when the environment does not describe a usable client."""


@dataclass(frozen=True)
class AnytypeConfig:
    """Settings for one Anytype API client.

    Build it once per process; the client and every tool call share it
    read-only.
    """

    api_key: str
    api_server: str = DEFAULT_API_SERVER
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AnytypeConfig":
        env = os.environ if environ is None else environ

        api_key = env.get("ANYTYPE_API_KEY", "").strip()
        if not api_key:
            raise ConfigError(
                "ANYTYPE_API_KEY environment variable is not set. "
                "Create an API key in Anytype under Settings → API Keys."
            )

        api_server = env.get("ANYTYPE_API_SERVER", "").strip() or DEFAULT_API_SERVER

        raw_timeout = env.get("ANYTYPE_TIMEOUT", "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError(f"ANYTYPE_TIMEOUT must be a number, got {raw_timeout!r}") from None
            if timeout <= 0:
                raise ConfigError(f"ANYTYPE_TIMEOUT must be positive, got {raw_timeout!r}")
        else:
            timeout = DEFAULT_TIMEOUT

        return cls(api_key=api_key, api_server=api_server.rstrip("/"), timeout=timeout)

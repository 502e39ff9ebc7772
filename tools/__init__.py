# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the MCP side of the bridge.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the agent and core/:
#     schemas.py     the shapes the agent sees
#     adapters.py    core results → tool results (Ok / Err), property policy
#     mcp_server.py  FastMCP registration, logging, error rendering
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP themselves (that's core/anytype.py)
#   - They do NOT write anything: every tool is read-only
#   - They do NOT retry, cache or page through results on their own
# =============================================================================

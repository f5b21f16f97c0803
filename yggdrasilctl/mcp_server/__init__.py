"""MCP server exposing AdminClient methods as tools.

Package structure:
  __init__.py       — FastMCP init, register() calls, re-exports
  _core.py          — Client caching, _call dispatcher, error envelope, validation
  _tools_read.py    — node/peer/routing/queue queries
  _tools_write.py   — peer management and raw admin requests

Run: yggdrasilctl-mcp
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from yggdrasilctl.mcp_server import _tools_read, _tools_write

mcp = FastMCP(
    "yggdrasil",
    instructions=(
        "Admin tools for a local mesh network node. "
        "Each tool performs one request against the node's admin socket. "
        "Peer ports come from get_peers. "
        "Use admin_request for commands without a dedicated tool; "
        "list_commands shows what the node accepts."
    ),
)

for _mod in [_tools_read, _tools_write]:
    _mod.register(mcp)

from yggdrasilctl.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _finalize_tool_result,
    _get_client,
)
from yggdrasilctl.mcp_server._tools_read import (  # noqa: E402, F401
    get_dht,
    get_peers,
    get_routes,
    get_self,
    get_sessions,
    get_switch_peers,
    get_switch_queues,
    get_tunnel_routing,
    get_tuntap,
    list_commands,
)
from yggdrasilctl.mcp_server._tools_write import (  # noqa: E402, F401
    add_peer,
    admin_request,
    remove_peer,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()

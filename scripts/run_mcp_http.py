"""Run the yggdrasil admin MCP server in streamable-http mode."""

import os

from yggdrasilctl.mcp_server import mcp

if __name__ == "__main__":
    mcp.settings.host = os.environ.get("YGGDRASILCTL_MCP_HOST", "127.0.0.1")
    mcp.settings.port = int(os.environ.get("YGGDRASILCTL_MCP_PORT", "8809"))
    mcp.run(transport="streamable-http")

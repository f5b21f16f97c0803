"""Read tools: node, peer, routing and queue queries."""

from __future__ import annotations

from yggdrasilctl.mcp_server._core import _call, _finalize_tool_result


def list_commands() -> dict:
    """List the admin commands the daemon accepts, with their parameters."""
    return _finalize_tool_result(_call("list_commands"))


def get_self() -> dict:
    """Get this node's build, IPv6 address, subnet, public key and coords."""
    return _finalize_tool_result(_call("get_self"))


def get_peers() -> dict:
    """Get directly connected peers keyed by IPv6 address (port, uptime, bytes, endpoint)."""
    return _finalize_tool_result(_call("get_peers"))


def get_switch_peers() -> dict:
    """Get switch-level peers keyed by switch port."""
    return _finalize_tool_result(_call("get_switch_peers"))


def get_dht() -> dict:
    """Get known DHT entries keyed by IPv6 address."""
    return _finalize_tool_result(_call("get_dht"))


def get_sessions() -> dict:
    """Get open sessions keyed by remote IPv6 address."""
    return _finalize_tool_result(_call("get_sessions"))


def get_tuntap() -> dict:
    """Get TUN/TAP interface name, MTU and TAP mode."""
    return _finalize_tool_result(_call("get_tuntap"))


def get_switch_queues() -> dict:
    """Get switch queue counters and per-queue sizes."""
    return _finalize_tool_result(_call("get_switch_queues"))


def get_routes() -> dict:
    """Get tunnel-routing routes (destination subnet -> gateway key)."""
    return _finalize_tool_result(_call("get_routes"))


def get_tunnel_routing() -> dict:
    """Get whether tunnel routing is enabled."""
    return _finalize_tool_result(_call("get_tunnel_routing"))


def register(mcp):
    """Register all read tools with the FastMCP instance."""
    mcp.tool()(list_commands)
    mcp.tool()(get_self)
    mcp.tool()(get_peers)
    mcp.tool()(get_switch_peers)
    mcp.tool()(get_dht)
    mcp.tool()(get_sessions)
    mcp.tool()(get_tuntap)
    mcp.tool()(get_switch_queues)
    mcp.tool()(get_routes)
    mcp.tool()(get_tunnel_routing)

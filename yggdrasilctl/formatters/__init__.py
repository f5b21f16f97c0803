"""Output formatting package for yggdrasilctl.

Re-exports all public names so consumers can do:
    from yggdrasilctl.formatters import format_info_table
"""

from yggdrasilctl.formatters._core import bullet_section, pretty
from yggdrasilctl.formatters._lists import (
    format_adds_and_removes,
    format_allowed_keys,
    format_multicast_interfaces,
    format_routes,
    format_source_subnets,
)
from yggdrasilctl.formatters._node import (
    format_dot,
    format_self,
    format_tunnel_routing,
    format_tuntap,
)
from yggdrasilctl.formatters._switch import fill_percent, format_switch_queues
from yggdrasilctl.formatters._table import (
    format_cell,
    format_duration,
    format_info_table,
    format_uint,
)

__all__ = [
    "bullet_section",
    "fill_percent",
    "format_adds_and_removes",
    "format_allowed_keys",
    "format_cell",
    "format_dot",
    "format_duration",
    "format_info_table",
    "format_multicast_interfaces",
    "format_routes",
    "format_self",
    "format_source_subnets",
    "format_switch_queues",
    "format_tunnel_routing",
    "format_tuntap",
    "format_uint",
    "pretty",
]

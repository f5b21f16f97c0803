"""
Response dispatch: pick a formatter by the command name the daemon echoes back.
"""

from yggdrasilctl.formatters import (
    format_adds_and_removes,
    format_allowed_keys,
    format_dot,
    format_info_table,
    format_multicast_interfaces,
    format_routes,
    format_self,
    format_source_subnets,
    format_switch_queues,
    format_tunnel_routing,
    format_tuntap,
    pretty,
)

FORMATTERS = {}


def register(names, formatter):
    """Route each command in *names* (case-insensitive) to *formatter*.

    A formatter is called as ``formatter(response_value, verbose)`` and
    returns the text to print.
    """
    for name in names:
        FORMATTERS[name.lower()] = formatter


register(["dot"], format_dot)
register(
    ["list", "getpeers", "getswitchpeers", "getdht", "getsessions", "dhtping"],
    format_info_table,
)
register(["gettuntap", "settuntap"], format_tuntap)
register(["getself"], format_self)
register(["getswitchqueues"], format_switch_queues)
register(
    [
        "addpeer",
        "removepeer",
        "addallowedencryptionpublickey",
        "removeallowedencryptionpublickey",
        "addsourcesubnet",
        "addroute",
        "removesourcesubnet",
        "removeroute",
    ],
    format_adds_and_removes,
)
register(["getallowedencryptionpublickeys"], format_allowed_keys)
register(["getmulticastinterfaces"], format_multicast_interfaces)
register(["getsourcesubnets"], format_source_subnets)
register(["getroutes"], format_routes)
register(["settunnelrouting", "gettunnelrouting"], format_tunnel_routing)


def formatter_for(command):
    """Return the formatter registered for *command*, or None."""
    if command is None:
        return None
    return FORMATTERS.get(command.lower())


def render_response(resp, verbose=False):
    """Render a validated Response as human-readable text.

    Commands without a formatter print their response as indented JSON.
    """
    formatter = formatter_for(resp.command)
    if formatter is None:
        return pretty(resp.response)
    return formatter(resp.response, verbose)


def handle_response(resp, verbose=False, raw_json=False):
    """Print a validated Response and return the process exit code.

    Output is rendered even for a non-success status; the exit code is 1
    unless the status is "success".
    """
    text = pretty(resp.response) if raw_json else render_response(resp, verbose)
    if text:
        print(text)
    return 0 if resp.status == "success" else 1

"""Formatters for the node itself: self info, TUN/TAP, tunnel routing, graph export."""

from yggdrasilctl.values import as_bool, as_number, as_record, as_text, field, to_display_string


def _known(value):
    return value is not None and value != "unknown"


def format_self(res, verbose=False):
    """Format getSelf: one block per address under res["self"]."""
    lines = []
    for address, info in (field(res, "self", as_record) or {}).items():
        build_name = field(info, "build_name", as_text)
        if _known(build_name):
            lines.append(f"Build name: {build_name}")
        build_version = field(info, "build_version", as_text)
        if _known(build_version):
            lines.append(f"Build version: {build_version}")
        lines.append(f"IPv6 address: {address}")
        for key, label in (("subnet", "IPv6 subnet"), ("key", "Public key"), ("coords", "Coords")):
            value = field(info, key, as_text)
            if value is not None:
                lines.append(f"{label}: {value}")
        if verbose:
            for key, label in (
                ("node_id", "Node ID"),
                ("box_pub_key", "Public encryption key"),
                ("box_sig_key", "Public signing key"),
            ):
                value = field(info, key, as_text)
                if value is not None:
                    lines.append(f"{label}: {value}")
    return "\n".join(lines)


def format_tuntap(res, verbose=False):
    """Format getTunTap/setTunTap: interface name, MTU, TAP mode."""
    lines = []
    for name, info in (as_record(res) or {}).items():
        lines.append(f"Interface name: {name}")
        mtu = field(info, "mtu", as_number)
        if mtu is not None:
            lines.append(f"Interface MTU: {to_display_string(mtu)}")
        tap_mode = field(info, "tap_mode", as_bool)
        if tap_mode is not None:
            lines.append(f"TAP mode: {to_display_string(tap_mode)}")
    return "\n".join(lines)


def format_tunnel_routing(res, verbose=False):
    if field(res, "enabled", as_bool):
        return "Tunnel routing is enabled"
    return "Tunnel routing is disabled"


def format_dot(res, verbose=False):
    """Graph export: the "dot" text verbatim."""
    return field(res, "dot", as_text) or ""

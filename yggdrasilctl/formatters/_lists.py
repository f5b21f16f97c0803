"""Formatters for add/remove results, key/interface/subnet listings and routes."""

from yggdrasilctl.formatters._core import bullet_section
from yggdrasilctl.values import as_record, as_sequence, as_text, field, to_display_string

_CHANGE_LABELS = (
    ("added", "Added"),
    ("not_added", "Not added"),
    ("removed", "Removed"),
    ("not_removed", "Not removed"),
)


def format_adds_and_removes(res, verbose=False):
    """One line per entry of the added/not_added/removed/not_removed arrays."""
    lines = []
    for key, label in _CHANGE_LABELS:
        for item in field(res, key, as_sequence) or []:
            lines.append(f"{label}: {to_display_string(item)}")
    return "\n".join(lines)


def _listing(res, key, title, empty):
    items = field(res, key, as_sequence)
    if not items:
        return empty
    lines = []
    bullet_section(lines, title, [to_display_string(item) for item in items])
    return "\n".join(lines)


def format_allowed_keys(res, verbose=False):
    return _listing(
        res,
        "allowed_box_pubs",
        "Connections are allowed only from the following public box keys:",
        "All connections are allowed",
    )


def format_multicast_interfaces(res, verbose=False):
    return _listing(
        res,
        "multicast_interfaces",
        "Multicast peer discovery is active on:",
        "No multicast interfaces found",
    )


def format_source_subnets(res, verbose=False):
    return _listing(res, "source_subnets", "Source subnets:", "No source subnets found")


def format_routes(res, verbose=False):
    """Format getRoutes: "destination via gateway" per entry."""
    routes = field(res, "routes", as_record)
    if not routes:
        return "No routes found"
    lines = []
    bullet_section(
        lines,
        "Routes:",
        [f"{dest} via {gw}" for dest, gw in routes.items() if as_text(gw) is not None],
    )
    return "\n".join(lines)

"""Generic aligned-table rendering for peer/session/DHT style responses (stdlib only)."""

import math
import re

from yggdrasilctl import config
from yggdrasilctl.values import as_number, as_record, to_display_string

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_BREAK_RE = re.compile(r"[\t\n\r]+")

_UINT_FIELDS = frozenset({"bytes_sent", "bytes_recvd"})
_DURATION_FIELDS = frozenset({"uptime", "last_seen"})
_MISSING = "-"


def _sanitize_str(s):
    """Strip ANSI escapes and control chars; tabs and line breaks become one space."""
    if not s:
        return s
    return _BREAK_RE.sub(" ", _CONTROL_RE.sub("", str(s)))


def format_uint(value):
    """Render a number as an unsigned integer, truncating any fraction."""
    return str(max(0, math.trunc(value)))


def format_duration(seconds):
    """Render a seconds count as HH:MM:SS (hours may exceed two digits)."""
    seconds = max(0.0, float(seconds))
    hours = math.floor(seconds / 3600)
    minutes = math.floor(seconds / 60) % 60
    secs = math.floor(seconds) % 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_cell(name, value):
    """Format one field value, applying unit conversions by field name."""
    number = as_number(value)
    if number is not None and math.isfinite(number):
        if name in _UINT_FIELDS:
            return format_uint(number)
        if name in _DURATION_FIELDS:
            return format_duration(number)
    return _sanitize_str(to_display_string(value))


def _records(category):
    """Return the {key: record} mapping of a category, or {} if misshapen."""
    entries = as_record(category)
    if not entries:
        return {}
    for record in entries.values():
        if as_record(record) is None:
            return {}
    return entries


def _columns(records, verbose):
    # Sampled from the first record only, not a union over all records.
    sample = next(iter(records.values()))
    return sorted(k for k in sample if verbose or k not in config.HIDDEN_FIELDS)


def _render_category(records, verbose):
    columns = _columns(records, verbose)
    cells = {
        key: [format_cell(col, rec[col]) if col in rec else _MISSING for col in columns]
        for key, rec in records.items()
    }
    keys = {key: _sanitize_str(str(key)) for key in records}
    key_width = max(len(k) for k in keys.values())
    widths = [
        max([len(col)] + [len(row[i]) for row in cells.values()]) for i, col in enumerate(columns)
    ]

    def _line(first, values):
        parts = [f"{first:<{key_width}}"]
        parts.extend(f"{v:<{w}}" for v, w in zip(values, widths))
        return "  ".join(parts).rstrip()

    lines = []
    if columns:
        lines.append(_line("", columns))
    for key, row in cells.items():
        lines.append(_line(keys[key], row))
    return lines


def format_info_table(res, verbose=False):
    """Format a {category: {key: {field: value}}} response as aligned tables.

    Each category is laid out on its own: the record key first, then the
    fields sorted by name. Misshapen or empty categories produce no output.
    """
    lines = []
    for category in (as_record(res) or {}).values():
        records = _records(category)
        if records:
            lines.extend(_render_category(records, verbose))
    return "\n".join(lines)

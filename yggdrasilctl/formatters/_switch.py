"""Switch queue diagnostics formatter."""

import math

from yggdrasilctl import config
from yggdrasilctl.formatters._table import format_uint
from yggdrasilctl.values import as_number, as_record, as_sequence, as_text, field


def fill_percent(size, capacity):
    """Whole-number fill percentage: floor(100 / capacity * size)."""
    if capacity <= 0:
        return 0
    return max(0, math.floor(100 / capacity * size))


def _queue_entry(queue):
    """Return (port, size, packets, id) or None when a field is missing."""
    port = field(queue, "queue_port", as_number)
    size = field(queue, "queue_size", as_number)
    packets = field(queue, "queue_packets", as_number)
    queue_id = field(queue, "queue_id", as_text)
    if None in (port, size, packets, queue_id):
        return None
    return port, size, packets, queue_id


def format_switch_queues(res, verbose=False):
    """Format getSwitchQueues: totals, per-queue lines, per-port aggregates."""
    info = field(res, "switchqueues", as_record) or {}
    lines = []
    for key, label, unit in (
        ("queues_count", "Active queue count", "queues"),
        ("queues_size", "Active queue size", "bytes"),
        ("highest_queues_count", "Highest queue count", "queues"),
        ("highest_queues_size", "Highest queue size", "bytes"),
    ):
        value = field(info, key, as_number)
        if value is not None:
            lines.append(f"{label}: {format_uint(value)} {unit}")

    max_size = field(info, "maximum_queues_size", as_number)
    if max_size is not None:
        lines.append(f"Maximum queue size: {format_uint(max_size)} bytes")
    else:
        max_size = config.DEFAULT_MAX_QUEUE_SIZE

    # port -> [queue count, total size, total packets], first-seen order
    ports = {}
    entries = [e for e in map(_queue_entry, field(info, "queues", as_sequence) or []) if e]
    if entries:
        lines.append("Active queues:")
    for port, size, packets, queue_id in entries:
        totals = ports.setdefault(port, [0, 0, 0])
        totals[0] += 1
        totals[1] += size
        totals[2] += packets
        lines.append(
            f"- Switch port {format_uint(port)}, Stream ID: {queue_id}, "
            f"size: {format_uint(size)} bytes ({fill_percent(size, max_size)}% full), "
            f"{format_uint(packets)} packets"
        )

    if ports:
        lines.append("Aggregated statistics by switchport:")
    for port, (count, size, packets) in ports.items():
        lines.append(
            f"- Switch port {format_uint(port)}, size: {format_uint(size)} bytes "
            f"({fill_percent(size, count * max_size)}% full), {format_uint(packets)} packets"
        )
    return "\n".join(lines)

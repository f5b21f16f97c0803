"""Core output helpers shared by the formatters and the dispatcher."""

import json


def pretty(data):
    """Two-space indented JSON with sorted keys; also the raw -json output."""
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)


def bullet_section(lines, title, items):
    """Append *title* and one "- item" line per entry of *items*."""
    lines.append(title)
    for item in items:
        lines.append(f"- {item}")

"""
Safe accessors for schema-less admin socket values.

Decoded JSON is used as-is: None, bool, int/float, str, list, dict.
Every accessor returns None instead of raising when the value does not
have the expected type, so formatters can skip a line rather than crash.
These helpers have no side effects.
"""

import json


def as_bool(value):
    return value if isinstance(value, bool) else None


def as_number(value):
    """Return *value* if it is an int or float (bools excluded), else None."""
    if isinstance(value, bool):
        return None
    return value if isinstance(value, (int, float)) else None


def as_text(value):
    return value if isinstance(value, str) else None


def as_sequence(value):
    return value if isinstance(value, list) else None


def as_record(value):
    return value if isinstance(value, dict) else None


def field(record, name, accessor=None):
    """Look up *name* in *record* and apply *accessor* to the result.

    Returns None when *record* is not a dict, the key is missing, or the
    accessor rejects the value.
    """
    rec = as_record(record)
    if rec is None or name not in rec:
        return None
    value = rec[name]
    return accessor(value) if accessor else value


def to_display_string(value):
    """Render any value as its natural text form."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)

"""
Typed models for admin socket requests and responses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from yggdrasilctl.exceptions import DecodeError, UsageError
from yggdrasilctl.transport import log_event
from yggdrasilctl.values import as_record, as_text

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Request:
    """One admin command: name plus flat key/value parameters."""

    name: str
    params: dict[str, Any] = field(default_factory=dict)

    def to_wire(self) -> dict[str, Any]:
        """Parameters are siblings of "request", not nested under it."""
        payload: dict[str, Any] = {"request": self.name}
        payload.update(self.params)
        return payload


@dataclass(frozen=True)
class Response:
    """Decoded response envelope. Fields stay untyped beyond the envelope."""

    status: Any
    request: Any
    error: Any
    response: Any
    has_request: bool
    has_response: bool
    has_error: bool
    raw: Any = None

    @classmethod
    def from_value(cls, value):
        if not isinstance(value, dict):
            raise DecodeError(
                "[ERROR] Malformed admin socket response: "
                f"expected JSON object, got {type(value).__name__}."
            )
        return cls(
            status=value.get("status"),
            request=value.get("request"),
            error=value.get("error"),
            response=value.get("response"),
            has_request="request" in value,
            has_response="response" in value,
            has_error="error" in value,
            raw=value,
        )

    @property
    def command(self) -> str | None:
        """Lower-cased command name echoed back by the daemon, if any."""
        req = as_record(self.request)
        if req is None:
            return None
        name = as_text(req.get("request"))
        return name.lower() if name is not None else None


def _coerce_param(value: str) -> Any:
    if _INT_RE.fullmatch(value):
        return int(value)
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return value


def build_request(args) -> Request:
    """Build a Request from command-line tokens.

    The first token names the command. Every later token is a parameter:
    ``key`` becomes True, ``key=value`` is coerced to int or bool when it
    parses as one, and ``key=a=b`` keeps everything after the first ``=``
    as text without coercion.
    """
    tokens = list(args)
    while tokens and tokens[0].startswith("-"):
        log_event(phase="ignore_flag", flag=tokens[0],
                  reason="flags must be specified before other parameters")
        tokens.pop(0)
    if not tokens:
        raise UsageError("[ERROR] No command given.")

    name = tokens[0]
    log_event(phase="build", request=name)
    params: dict[str, Any] = {}
    for token in tokens[1:]:
        parts = token.split("=")
        if len(parts) == 1:
            params[parts[0]] = True
        elif len(parts) == 2:
            params[parts[0]] = _coerce_param(parts[1])
        else:
            params[parts[0]] = "=".join(parts[1:])
        log_event(phase="param", key=parts[0], value=params[parts[0]])
    return Request(name=name, params=params)

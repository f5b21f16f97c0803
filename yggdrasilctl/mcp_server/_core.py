"""Core helpers: client caching, _call dispatcher, error envelope, input validation."""

from __future__ import annotations

import re
from typing import Any

from yggdrasilctl import AdminClient, CliError

_client: AdminClient | None = None

_COMMAND_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
_PARAM_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_MAX_PARAM_LEN = 1024


def _get_client() -> AdminClient:
    """Return a cached AdminClient, creating one on first use."""
    global _client
    if _client is None:
        _client = AdminClient()
    return _client


def _contract_error(message: str, error_type: str = "error") -> dict:
    return {"ok": False, "type": error_type, "error": message}


def _finalize_tool_result(result: Any) -> dict:
    """Tools always return dicts: errors pass through, others gain ok=True."""
    if isinstance(result, dict):
        if result.get("ok") is False:
            return result
        out = dict(result)
        out.setdefault("ok", True)
        return out
    return {"ok": True, "data": result}


_ALLOWED_METHODS = {
    "list_commands",
    "get_self",
    "get_peers",
    "get_switch_peers",
    "get_dht",
    "get_sessions",
    "get_tuntap",
    "get_switch_queues",
    "get_routes",
    "get_tunnel_routing",
    "add_peer",
    "remove_peer",
}


def _call(method_name: str, **kwargs):
    """Call an AdminClient method, converting exceptions to error dicts."""
    if method_name not in _ALLOWED_METHODS:
        return _contract_error(f"Unknown method: {method_name}", "error")
    try:
        client = _get_client()
        return getattr(client, method_name)(**kwargs)
    except CliError as e:
        return _contract_error(str(e), type(e).__name__)
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")


def _validate_command(command: str) -> str:
    if not isinstance(command, str) or not _COMMAND_RE.match(command):
        raise CliError(f"[ERROR] Invalid admin command name: {command!r}")
    return command


def _validate_params(params: dict | None) -> dict:
    """Accept only flat string keys with bool/number/string values."""
    out = {}
    for key, value in (params or {}).items():
        if not isinstance(key, str) or not _PARAM_KEY_RE.match(key) or key == "request":
            raise CliError(f"[ERROR] Invalid parameter name: {key!r}")
        if not isinstance(value, (bool, int, float, str)):
            raise CliError(
                f"[ERROR] Parameter '{key}' must be a string, number or boolean, "
                f"got {type(value).__name__}."
            )
        if isinstance(value, str) and len(value) > _MAX_PARAM_LEN:
            raise CliError(f"[ERROR] Parameter '{key}' exceeds {_MAX_PARAM_LEN} characters.")
        out[key] = value
    return out

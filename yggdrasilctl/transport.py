"""
Socket layer and diagnostic logging for yggdrasilctl.
"""

import json
import socket
import sys

from yggdrasilctl import config
from yggdrasilctl.exceptions import ConnectError

# ---------------------------------------------------------------------------
# Diagnostic log
# ---------------------------------------------------------------------------

_log_buffer = []


def log_event(**fields):
    """Record a structured diagnostic event.

    Events are always buffered (bounded) so they can be dumped after a fatal
    error, and echoed to stderr when logging is enabled.
    """
    line = "[ADMIN] " + json.dumps(fields, ensure_ascii=False, sort_keys=True, default=str)
    _log_buffer.append(line)
    if len(_log_buffer) > config.LOG_BUFFER_LIMIT:
        del _log_buffer[: len(_log_buffer) - config.LOG_BUFFER_LIMIT]
    if config.LOG_ENABLED:
        print(line, file=sys.stderr)


def dump_log(file=None):
    """Write every buffered event to *file* (stderr by default)."""
    out = file or sys.stderr
    for line in _log_buffer:
        print(line, file=out)


def reset_log():
    _log_buffer.clear()


def buffered_events():
    return list(_log_buffer)


# ---------------------------------------------------------------------------
# Endpoint parsing
# ---------------------------------------------------------------------------


def _strip_slashes(rest):
    return rest[2:] if rest.startswith("//") else rest


def _tcp_address(hostport, endpoint):
    hostport = hostport.rstrip("/")
    host, sep, port = hostport.rpartition(":")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not sep or not host:
        raise ConnectError(
            f"[ERROR] Malformed admin endpoint '{endpoint}': expected host:port."
        )
    try:
        port_num = int(port)
    except ValueError:
        port_num = -1
    if not 0 < port_num < 65536:
        raise ConnectError(f"[ERROR] Malformed admin endpoint '{endpoint}': bad port '{port}'.")
    return host, port_num


def parse_endpoint(endpoint):
    """Resolve an endpoint URI into ("unix", path) or ("tcp", (host, port)).

    Accepts unix:<path>, unix://<path>, tcp:<host:port>, tcp://<host:port>
    and bare host:port. Raises ConnectError for anything else.
    """
    if not endpoint:
        raise ConnectError("[ERROR] No admin socket endpoint configured.")
    scheme, sep, rest = endpoint.partition(":")
    scheme = scheme.lower()
    if sep and scheme == "unix":
        path = _strip_slashes(rest)
        if not path:
            raise ConnectError(f"[ERROR] Malformed admin endpoint '{endpoint}': empty path.")
        return "unix", path
    if sep and scheme == "tcp":
        return "tcp", _tcp_address(_strip_slashes(rest), endpoint)
    if "://" in endpoint:
        raise ConnectError(
            f"[ERROR] Unknown protocol in admin endpoint '{endpoint}'. Use unix:// or tcp://"
        )
    return "tcp", _tcp_address(endpoint, endpoint)


# ---------------------------------------------------------------------------
# Dial
# ---------------------------------------------------------------------------


def _dial_unix(path, timeout):
    family = getattr(socket, "AF_UNIX", None)
    if family is None:
        raise OSError("UNIX sockets are not supported on this platform")
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.settimeout(timeout)
        sock.connect(path)
    except OSError:
        sock.close()
        raise
    return sock


def connect(endpoint, timeout=None):
    """Open a stream socket to the admin endpoint.

    *timeout* of None or 0 blocks indefinitely. Any dial failure is raised
    as ConnectError.
    """
    kind, address = parse_endpoint(endpoint)
    deadline = timeout or None
    if kind == "unix":
        log_event(phase="connect", transport="unix", address=address)
    else:
        log_event(phase="connect", transport="tcp", address=f"{address[0]}:{address[1]}")
    try:
        if kind == "unix":
            sock = _dial_unix(address, deadline)
        else:
            sock = socket.create_connection(address, timeout=deadline)
    except OSError as e:
        log_event(phase="connect_failed", endpoint=endpoint, error=str(e))
        raise ConnectError(f"[ERROR] Could not connect to admin socket at {endpoint}: {e}") from e
    log_event(phase="connected", endpoint=endpoint)
    return sock

"""
yggdrasilctl — command-line client for the mesh daemon's admin socket
"""

import json
import sys

from yggdrasilctl import config
from yggdrasilctl.client import AdminClient
from yggdrasilctl.dispatch import handle_response
from yggdrasilctl.exceptions import (
    CliError,
    ConnectError,
    EncodeError,
    MalformedResponseError,
    ProtocolError,
)
from yggdrasilctl.models import build_request
from yggdrasilctl.transport import dump_log, log_event

HELP_TEXT = """\
Usage: yggdrasilctl [options] command [key=value] [key=value] ...

Options go before the command; every token after it is sent as a parameter.

Options:
  -endpoint <uri>         Admin socket endpoint (default: $YGGDRASILCTL_ENDPOINT
                          or unix:///var/run/yggdrasil.sock)
                          unix:///path/to/socket, tcp://host:port or host:port
  -json                   Output the raw response body as indented JSON
  -v, --verbose           Include hidden fields (public keys, nodeinfo, ...)
  -version                Show build name and version of this tool
  --timeout <seconds>     Give up if the daemon does not answer in time
                          (default: wait forever)
  --debug                 Print diagnostic events to stderr

Parameters:
  key                     Sent as true
  key=value               Sent as a number or true/false when it parses as
                          one, otherwise as a string
  key=a=b                 Everything after the first '=' is sent as a string

Examples:
  yggdrasilctl list
  yggdrasilctl getPeers
  yggdrasilctl -v getSelf
  yggdrasilctl addPeer uri=tcp://192.168.0.1:9001
  yggdrasilctl removePeer port=1
  yggdrasilctl -endpoint=tcp://localhost:9001 getDHT
  yggdrasilctl -endpoint=unix:///var/run/ygg.sock getDHT
"""

_VALUE_FLAGS = {
    "-endpoint": "endpoint",
    "--endpoint": "endpoint",
    "-timeout": "timeout",
    "--timeout": "timeout",
}


def _version_text():
    return (
        f"Build name: {config.BUILD_NAME}\n"
        f"Build version: {config.VERSION}\n"
        f"To get the version number of the running node, run {config.BUILD_NAME} getSelf"
    )


def _non_negative_float(value, flag):
    try:
        parsed = float(value)
    except ValueError:
        parsed = -1.0
    if parsed < 0:
        raise CliError(f"[ERROR] {flag} must be a non-negative number of seconds.")
    return parsed


# ---------------------------------------------------------------------------
# Global flag extraction
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags that come before the command.

    Accepts single-dash spellings (-json, -endpoint) as well as
    double-dash ones, and ``-flag=value`` for flags that take a value.
    Parsing stops at the first token that is not a global flag (or after
    ``--``); that token and everything after it are returned untouched.
    Returns (endpoint, timeout, raw_json, verbose, debug, show_help, remaining).
    Handles --version directly.
    """
    values = {"endpoint": None, "timeout": None}
    raw_json = False
    verbose = False
    debug = False
    show_help = False
    i = 0
    while i < len(argv):
        arg = argv[i]
        name, eq, inline = arg.partition("=")
        if arg == "--":
            i += 1
            break
        elif arg in ("-version", "--version"):
            print(_version_text())
            sys.exit(0)
        elif arg in ("-json", "--json"):
            raw_json = True
        elif arg in ("-v", "--verbose"):
            verbose = True
        elif arg == "--debug":
            debug = True
        elif arg in ("-h", "-help", "--help"):
            show_help = True
        elif name in _VALUE_FLAGS and eq:
            values[_VALUE_FLAGS[name]] = inline
        elif arg in _VALUE_FLAGS:
            if i + 1 >= len(argv):
                raise CliError(f"[ERROR] {arg} requires a value.")
            values[_VALUE_FLAGS[arg]] = argv[i + 1]
            i += 2
            continue
        else:
            break
        i += 1
    timeout = None
    if values["timeout"] is not None:
        timeout = _non_negative_float(values["timeout"], "--timeout")
    return values["endpoint"], timeout, raw_json, verbose, debug, show_help, argv[i:]


# ---------------------------------------------------------------------------
# Error output
# ---------------------------------------------------------------------------


def _error_type(err):
    return type(err).__name__


def _emit_cli_error(err, raw_json):
    msg = str(err)
    if raw_json:
        payload = {
            "ok": False,
            "error": {
                "type": _error_type(err),
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    # Errors reported by the daemon itself are command output.
    if isinstance(err, (ProtocolError, MalformedResponseError)):
        print(msg)
        return
    print(msg, file=sys.stderr)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run(argv):
    """Run one invocation and return its exit code."""
    raw_json = False
    try:
        endpoint, timeout, raw_json, verbose, debug, show_help, remaining = (
            _extract_global_flags(argv)
        )
        if show_help or not remaining:
            print(HELP_TEXT)
            return 0

        if debug:
            config.LOG_ENABLED = True

        req = build_request(remaining)
        client = AdminClient(endpoint=endpoint, timeout=timeout)
        resp = client.send(req)
        log_event(phase="render", command=resp.command, status=resp.status)
        return handle_response(resp, verbose=verbose, raw_json=raw_json)

    except CliError as e:
        log_event(phase="error", type=_error_type(e), message=str(e))
        _emit_cli_error(e, raw_json)
        if isinstance(e, (ConnectError, EncodeError)) and not config.LOG_ENABLED:
            dump_log()
        return e.exit_code


def main():
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()

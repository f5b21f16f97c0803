"""
yggdrasilctl exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — any failure that ends the invocation."""

    exit_code = 1


class UsageError(CliError):
    """No command given, or command-line tokens that cannot form a request."""


class ConnectError(CliError):
    """Admin socket unreachable or endpoint misconfigured."""


class EncodeError(CliError):
    """Request could not be serialized."""


class DecodeError(CliError):
    """Response stream ended early or did not hold a JSON object."""


class ProtocolError(CliError):
    """Daemon answered with status "error"."""


class MalformedResponseError(CliError):
    """Successful response missing its request echo or body."""

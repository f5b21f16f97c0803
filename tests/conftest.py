"""
Shared test fixtures for yggdrasilctl tests.
Patches config so tests never read a real .env or talk to a real daemon.
"""

import json
import socket

import pytest

from yggdrasilctl import config, transport


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state and an empty log."""
    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "ENDPOINT", "unix:///nonexistent/yggdrasil-test.sock")
    monkeypatch.setattr(config, "TIMEOUT_SECONDS", 0.0)
    monkeypatch.setattr(config, "MAX_RESPONSE_BYTES", 5_000_000)
    monkeypatch.setattr(config, "LOG_ENABLED", False)
    transport.reset_log()
    yield
    transport.reset_log()


@pytest.fixture
def fake_daemon(monkeypatch):
    """Answer the next connection with a canned response.

    Usage: ``sent = fake_daemon({"status": "success", ...})``. The client gets
    one end of a socketpair; the returned function reads what it sent.
    """
    pairs = []

    def _install(payload, raw=None):
        client_end, daemon_end = socket.socketpair()
        daemon_end.sendall(raw if raw is not None else json.dumps(payload).encode("utf-8"))
        daemon_end.shutdown(socket.SHUT_WR)
        pairs.append((client_end, daemon_end))
        monkeypatch.setattr(
            "yggdrasilctl.client.connect", lambda endpoint, timeout=None: client_end
        )

        def _sent():
            daemon_end.settimeout(1)
            return json.loads(daemon_end.recv(65536).decode("utf-8"))

        return _sent

    yield _install
    for client_end, daemon_end in pairs:
        client_end.close()
        daemon_end.close()

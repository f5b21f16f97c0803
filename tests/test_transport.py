"""Tests for transport.py — endpoint parsing, dialing, diagnostic log."""

import io
import os
import socket
import tempfile

import pytest

from yggdrasilctl import config, transport
from yggdrasilctl.exceptions import ConnectError
from yggdrasilctl.transport import connect, parse_endpoint


class TestParseEndpoint:
    @pytest.mark.parametrize(
        "endpoint,expected",
        [
            ("unix:///var/run/yggdrasil.sock", ("unix", "/var/run/yggdrasil.sock")),
            ("unix:/tmp/ygg.sock", ("unix", "/tmp/ygg.sock")),
            ("UNIX:///tmp/ygg.sock", ("unix", "/tmp/ygg.sock")),
            ("tcp://localhost:9001", ("tcp", ("localhost", 9001))),
            ("tcp:127.0.0.1:9001", ("tcp", ("127.0.0.1", 9001))),
            ("tcp://[::1]:9001", ("tcp", ("::1", 9001))),
            ("localhost:9001", ("tcp", ("localhost", 9001))),
            ("127.0.0.1:9001", ("tcp", ("127.0.0.1", 9001))),
        ],
    )
    def test_valid(self, endpoint, expected):
        assert parse_endpoint(endpoint) == expected

    @pytest.mark.parametrize(
        "endpoint",
        [
            "",
            "http://localhost:9001",
            "unix://",
            "tcp://localhost",
            "tcp://localhost:notaport",
            "localhost:70000",
            ":9001",
        ],
    )
    def test_invalid(self, endpoint):
        with pytest.raises(ConnectError):
            parse_endpoint(endpoint)


@pytest.mark.skipif(not hasattr(socket, "AF_UNIX"), reason="needs unix sockets")
class TestConnectUnix:
    def test_connects_to_listening_socket(self):
        tmpdir = tempfile.mkdtemp()
        path = os.path.join(tmpdir, "a.sock")
        server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        server.bind(path)
        server.listen(1)
        try:
            sock = connect(f"unix://{path}", timeout=2)
            sock.close()
        finally:
            server.close()
            os.unlink(path)
            os.rmdir(tmpdir)
        assert any('"phase": "connected"' in line for line in transport.buffered_events())

    def test_missing_socket_raises_connect_error(self):
        with pytest.raises(ConnectError, match="Could not connect"):
            connect("unix:///nonexistent/dir/ygg.sock")
        assert any("connect_failed" in line for line in transport.buffered_events())


class TestConnectTcp:
    def test_refused_raises_connect_error(self):
        probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
        probe.close()
        with pytest.raises(ConnectError):
            connect(f"tcp://127.0.0.1:{port}", timeout=2)

    def test_connects_to_listener(self):
        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        server.bind(("127.0.0.1", 0))
        server.listen(1)
        port = server.getsockname()[1]
        try:
            sock = connect(f"127.0.0.1:{port}", timeout=2)
            assert sock.gettimeout() == 2
            sock.close()
        finally:
            server.close()


class TestLog:
    def test_buffered_not_printed_by_default(self, capsys):
        transport.log_event(phase="x", value=1)
        assert capsys.readouterr().err == ""
        assert transport.buffered_events() == ['[ADMIN] {"phase": "x", "value": 1}']

    def test_printed_when_enabled(self, capsys, monkeypatch):
        monkeypatch.setattr(config, "LOG_ENABLED", True)
        transport.log_event(phase="x")
        assert capsys.readouterr().err == '[ADMIN] {"phase": "x"}\n'

    def test_buffer_bounded(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_BUFFER_LIMIT", 3)
        for i in range(10):
            transport.log_event(n=i)
        events = transport.buffered_events()
        assert len(events) == 3
        assert events[-1] == '[ADMIN] {"n": 9}'

    def test_dump_log(self):
        transport.log_event(phase="a")
        transport.log_event(phase="b")
        out = io.StringIO()
        transport.dump_log(out)
        assert out.getvalue().splitlines() == [
            '[ADMIN] {"phase": "a"}',
            '[ADMIN] {"phase": "b"}',
        ]

"""Tests for client.py — envelope validation and one-shot exchange."""

import pytest

from yggdrasilctl.client import AdminClient, check_response
from yggdrasilctl.exceptions import (
    ConnectError,
    DecodeError,
    MalformedResponseError,
    ProtocolError,
)
from yggdrasilctl.models import Response


def _resp(**envelope):
    return Response.from_value(envelope)


class TestCheckResponse:
    def test_success_passes(self):
        resp = _resp(status="success", request={"request": "getSelf"}, response={})
        assert check_response(resp) is resp

    def test_error_with_text(self):
        with pytest.raises(ProtocolError) as exc_info:
            check_response(_resp(status="error", error="disabled", request={}))
        assert str(exc_info.value) == "Admin socket returned an error: disabled"
        assert exc_info.value.exit_code == 1

    def test_error_without_text(self):
        with pytest.raises(ProtocolError, match="didn't specify any error text"):
            check_response(_resp(status="error", request={}, response={}))

    def test_missing_request(self):
        with pytest.raises(MalformedResponseError, match="Missing request"):
            check_response(_resp(status="success", response={}))

    def test_missing_response(self):
        with pytest.raises(MalformedResponseError, match="Missing response body"):
            check_response(_resp(status="success", request={"request": "x"}))

    def test_other_status_passes_through(self):
        resp = _resp(status="pending", request={}, response={})
        assert check_response(resp).status == "pending"


class TestAdminClient:
    def test_defaults_from_config(self):
        client = AdminClient()
        assert client.endpoint == "unix:///nonexistent/yggdrasil-test.sock"
        assert client.timeout == 0.0

    def test_explicit_endpoint(self):
        client = AdminClient("tcp://localhost:9001", timeout=5)
        assert client.endpoint == "tcp://localhost:9001"
        assert client.timeout == 5

    def test_request_round_trip(self, fake_daemon):
        sent = fake_daemon(
            {
                "status": "success",
                "request": {"request": "addPeer", "uri": "tcp://a:1"},
                "response": {"added": ["tcp://a:1"]},
            }
        )
        resp = AdminClient().request("addPeer", uri="tcp://a:1")
        assert resp.response == {"added": ["tcp://a:1"]}
        assert sent() == {"request": "addPeer", "uri": "tcp://a:1"}

    def test_get_self(self, fake_daemon):
        fake_daemon(
            {
                "status": "success",
                "request": {"request": "getSelf"},
                "response": {"self": {"200::1": {"key": "K"}}},
            }
        )
        assert AdminClient().get_self() == {"self": {"200::1": {"key": "K"}}}

    def test_remove_peer_sends_port(self, fake_daemon):
        sent = fake_daemon({"status": "success", "request": {}, "response": {"removed": [3]}})
        AdminClient().remove_peer(3)
        assert sent() == {"request": "removePeer", "port": 3}

    def test_add_peer_with_interface(self, fake_daemon):
        sent = fake_daemon({"status": "success", "request": {}, "response": {}})
        AdminClient().add_peer("tcp://a:1", interface="eth0")
        assert sent() == {"request": "addPeer", "uri": "tcp://a:1", "interface": "eth0"}

    def test_error_status_raises(self, fake_daemon):
        fake_daemon({"status": "error", "error": "unknown command", "request": {}})
        with pytest.raises(ProtocolError, match="unknown command"):
            AdminClient().request("bogus")

    def test_truncated_response(self, fake_daemon):
        fake_daemon(None, raw=b'{"status": "success", "resp')
        with pytest.raises(DecodeError, match="before a complete"):
            AdminClient().get_self()

    def test_unreachable_endpoint(self):
        with pytest.raises(ConnectError):
            AdminClient("unix:///nonexistent/ygg.sock").get_self()

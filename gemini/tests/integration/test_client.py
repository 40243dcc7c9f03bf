"""
Integration tests for GeminiClient.

Tests session handling and heartbeats with mocked API responses.
"""

import base64

import orjson
import pytest

from gemini import GeminiClient, Role, DuplicateSessionError, UnknownSessionError
from gemini.exceptions import ApplicationError


class TestSessionManagement:
    """Test session management."""

    def test_add_and_bind_session(self, client):
        client.add_session(7, "K1", "S1", Role.TRADER)

        account = client.session(7)

        assert account.api_key == "K1"
        assert account.session_id == 7

    def test_multiple_sessions_segregated(self, client):
        client.add_session(1, "K1", "S1", Role.TRADER)
        client.add_session(2, "K2", "S2", Role.FUND_MANAGER)

        first, second = client.session(1), client.session(2)

        assert (first.api_key, second.api_key) == ("K1", "K2")
        assert first.nonce is not second.nonce

    def test_duplicate_session(self, client):
        client.add_session(1, "K1", "S1", Role.TRADER)

        with pytest.raises(DuplicateSessionError):
            client.add_session(1, "K2", "S2", Role.TRADER)

        assert client.session(1).api_key == "K1"

    def test_session_returns_same_account(self, client):
        client.add_session(1, "K1", "S1", Role.TRADER)

        assert client.session(1) is client.session(1)

    def test_unknown_session(self, client):
        with pytest.raises(UnknownSessionError):
            client.session(3)

    def test_sandbox_setting_applies_to_bound_accounts(self, client):
        client.settings.use_sandbox = True
        client.add_session(1, "K1", "S1", Role.TRADER)

        assert client.session(1).is_sandbox

    def test_session_metrics(self, client):
        client.add_session(1, "K1", "S1", Role.TRADER)

        assert client.metrics.registry.get_sample_value(
            "gemini_sessions_added_total", {"role": "trader"}
        ) == 1.0


class TestHeartbeats:
    """Test heartbeat fan-out."""

    def test_heartbeats_sent_only_for_heartbeat_sessions(self, client, transport):
        client.add_session(1, "K1", "S1", Role.TRADER, requires_heartbeat=True)
        client.add_session(2, "K2", "S2", Role.TRADER)
        client.add_session(3, "K3", "S3", Role.FUND_MANAGER, requires_heartbeat=True)

        results = client.send_heartbeats()

        assert results == {1: "ok", 3: "ok"}
        sent_keys = [c.kwargs["headers"]["X-GEMINI-APIKEY"] for c in transport.send.call_args_list]
        assert sent_keys == ["K1", "K3"]

    def test_heartbeat_continues_account_nonce_sequence(self, client, transport):
        client.add_session(1, "K1", "S1", Role.TRADER, requires_heartbeat=True)
        account = client.session(1)

        client.private.post_heartbeat(account)
        client.send_heartbeats()
        client.private.post_heartbeat(account)

        nonces = [
            orjson.loads(base64.b64decode(c.kwargs["headers"]["X-GEMINI-PAYLOAD"]))["nonce"]
            for c in transport.send.call_args_list
        ]
        assert nonces == [nonces[0], nonces[0] + 1, nonces[0] + 2]
        assert account.nonce.peek() == nonces[-1]

    def test_heartbeat_failures_collected(self, client, transport):
        client.add_session(1, "K1", "S1", Role.TRADER, requires_heartbeat=True)
        transport.send.return_value = b'{"result":"error","reason":"InvalidSignature","message":"bad"}'

        results = client.send_heartbeats()

        assert isinstance(results[1], ApplicationError)


def test_default_registry_used_when_not_injected(settings, transport):
    from gemini.auth.session_registry import get_default_registry

    client = GeminiClient(settings=settings, transport=transport)

    assert client.registry is get_default_registry()


def test_close_closes_transport(client, transport):
    client.close()

    transport.close.assert_called_once()

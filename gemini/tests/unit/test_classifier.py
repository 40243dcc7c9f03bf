"""Tests for response classification."""

from typing import List

import pytest

from gemini.api.classifier import ResponseClassifier
from gemini.exceptions import ApplicationError, DecodeError
from gemini.models import Order, Balance, HeartbeatResponse, OrderResult


@pytest.fixture
def classifier():
    return ResponseClassifier()


class TestProbe:
    """Test error envelope probe."""

    def test_probe_error_body(self, classifier):
        captured = classifier.probe(
            b'{"result":"error","reason":"InvalidNonce","message":"nonce too low"}'
        )

        assert captured.result == "error"
        assert captured.reason == "InvalidNonce"
        assert captured.message == "nonce too low"
        assert captured.is_error

    def test_probe_ignores_unknown_fields(self, classifier):
        captured = classifier.probe(b'{"order_id":123}')

        assert captured is not None
        assert not captured.is_error

    def test_probe_fails_on_array(self, classifier):
        assert classifier.probe(b'[{"currency":"BTC"}]') is None

    def test_probe_fails_on_non_string_result(self, classifier):
        assert classifier.probe(b'{"result":true}') is None

    def test_probe_reads_null_as_empty(self, classifier):
        captured = classifier.probe(b'{"result":"error","reason":null,"message":null}')

        assert captured.reason == ""
        assert captured.message == ""
        assert captured.is_error

    def test_probe_fails_on_invalid_json(self, classifier):
        assert classifier.probe(b'<html>bad gateway</html>') is None

    def test_ok_result_is_not_error(self, classifier):
        assert not classifier.probe(b'{"result":"ok","message":"done"}').is_error


class TestClassify:
    """Test two-phase classify."""

    def test_error_body_raises_application_error(self, classifier):
        body = b'{"result":"error","reason":"InvalidNonce","message":"nonce too low"}'

        with pytest.raises(ApplicationError) as exc_info:
            classifier.classify(body, Order)

        assert exc_info.value.message == "nonce too low"
        assert exc_info.value.reason == "InvalidNonce"
        assert exc_info.value.result == "error"

    def test_error_with_null_message_raises(self, classifier):
        body = b'{"result":"error","reason":"InvalidNonce","message":null}'

        with pytest.raises(ApplicationError) as exc_info:
            classifier.classify(body, dict)

        assert exc_info.value.reason == "InvalidNonce"
        assert exc_info.value.message == ""

    def test_reason_only_is_error(self, classifier):
        with pytest.raises(ApplicationError) as exc_info:
            classifier.classify(b'{"reason":"Maintenance"}', dict)

        assert exc_info.value.reason == "Maintenance"

    def test_ok_body_decodes(self, classifier):
        order = classifier.classify(b'{"order_id":123,"result":"ok"}', Order)

        assert order.order_id == 123

    def test_string_order_id_decodes(self, classifier):
        order = classifier.classify(b'{"order_id":"555","result":"ok"}', Order)

        assert order.order_id == 555

    def test_success_without_error_fields(self, classifier):
        balances = classifier.classify(
            b'[{"currency":"BTC","amount":"1.5","available":"1.0","availableForWithdrawal":"1.0"}]',
            List[Balance]
        )

        assert len(balances) == 1
        assert str(balances[0].amount) == "1.5"
        assert str(balances[0].available_for_withdrawal) == "1.0"

    def test_payload_with_non_string_result_decodes(self, classifier):
        """A success payload whose result field is not a string is not an error."""
        body = b'{"result":true,"order_id":1}'

        assert classifier.classify(body, dict) == {"result": True, "order_id": 1}

    def test_cancel_all_result(self, classifier):
        result = classifier.classify(
            b'{"result":"ok","details":{"cancelledOrders":[1,2],"cancelRejects":[]}}',
            OrderResult
        )

        assert result.details.cancelled_orders == [1, 2]

    def test_heartbeat(self, classifier):
        assert classifier.classify(b'{"result":"ok"}', HeartbeatResponse).result == "ok"

    def test_shape_mismatch_raises_decode_error(self, classifier):
        body = b'{"result":"ok","unexpected":1}'

        with pytest.raises(DecodeError) as exc_info:
            classifier.classify(body, Order)

        assert exc_info.value.raw_body == body

    def test_invalid_json_raises_decode_error(self, classifier):
        with pytest.raises(DecodeError) as exc_info:
            classifier.classify(b'not json', dict)

        assert exc_info.value.raw_body == b'not json'

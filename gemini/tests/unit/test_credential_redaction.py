"""
Test credential redaction in logs.

API secrets, keys, signed payloads and signatures must never be written to
log output in clear.
"""

import logging
import hashlib
import hmac
from io import StringIO

import pytest

from gemini.logging_config import setup_logging, get_logger as get_package_logger
from gemini.utils.structured_logging import (
    CredentialRedactionFilter,
    CorrelationIdFilter,
    StructuredLogger,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)


@pytest.fixture
def capture():
    """Logger with a redacting handler writing to a buffer."""
    logger = logging.getLogger("test_redaction")
    logger.setLevel(logging.DEBUG)
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(message)s'))
    handler.addFilter(CredentialRedactionFilter())
    logger.addHandler(handler)
    yield logger, stream
    logger.removeHandler(handler)


def test_redacts_secret_assignments(capture):
    logger, stream = capture
    logger.info("credentials: secret=3go1cQHkYkAXiUS9Bz8jpSXcDpT")

    output = stream.getvalue()
    assert "3go1cQHkYkAXiUS9Bz8jpSXcDpT" not in output
    assert "secret=[REDACTED]" in output


def test_redacts_gemini_api_keys(capture):
    logger, stream = capture
    logger.info("using account-Y2pIeHLt4KSu6sDSZ0Ep for session 7")

    output = stream.getvalue()
    assert "Y2pIeHLt4KSu6sDSZ0Ep" not in output
    assert "account-[REDACTED]" in output
    assert "session 7" in output


def test_redacts_signatures(capture):
    logger, stream = capture
    signature = hmac.new(b"S1", b"payload", hashlib.sha384).hexdigest()
    logger.info("signature %s", signature)

    assert signature not in stream.getvalue()
    assert "[REDACTED_SIGNATURE]" in stream.getvalue()


def test_truncates_long_base64_payloads(capture):
    logger, stream = capture
    payload = "eyJyZXF1ZXN0IjoiL3YxL29yZGVyL25ldyIsIm5vbmNlIjoxMjM0NTY3ODkwfQ=="
    logger.debug(f"Request payload: {payload}")

    output = stream.getvalue()
    assert payload not in output
    assert "eyJyZXF1...[REDACTED]" in output


def test_preserves_normal_messages(capture):
    logger, stream = capture
    message = "Placed order 555 buy 1 btcusd"
    logger.info(message)

    assert message in stream.getvalue()


def test_correlation_id_context():
    correlation_id = set_correlation_id()
    assert correlation_id.startswith("req_")
    assert get_correlation_id() == correlation_id

    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    CorrelationIdFilter().filter(record)
    assert record.correlation_id == correlation_id

    clear_correlation_id()
    assert get_correlation_id() is None


def test_structured_logger_passes_fields(caplog):
    events = StructuredLogger("gemini.test_events")

    with caplog.at_level(logging.INFO, logger="gemini.test_events"):
        events.info("session_added", session_id=7, role="trader")

    record = caplog.records[-1]
    assert record.getMessage() == "session_added"
    assert record.event == "session_added"
    assert record.session_id == 7


def test_setup_logging_applies_level_and_file(tmp_path):
    log_file = tmp_path / "gemini.log"
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level
    config = setup_logging(level="debug", log_file=str(log_file), json_format=True)

    try:
        assert config["loggers"]["gemini"]["level"] == "DEBUG"
        assert "file" in config["loggers"]["gemini"]["handlers"]
        assert config["handlers"]["console"]["formatter"] == "json"

        get_package_logger("tests").info("secret=abcdefghijklmnopqrstuvwxyz")
        for handler in logging.getLogger("gemini").handlers:
            handler.flush()

        contents = log_file.read_text()
        assert "abcdefghijklmnopqrstuvwxyz" not in contents
        assert "[REDACTED]" in contents
    finally:
        for handler in list(logging.getLogger("gemini").handlers):
            handler.close()
            logging.getLogger("gemini").removeHandler(handler)
        logging.getLogger("gemini").propagate = True
        logging.getLogger("gemini").setLevel(logging.NOTSET)
        root.handlers[:] = root_handlers
        root.setLevel(root_level)

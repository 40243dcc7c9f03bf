"""
Structured JSON logging for production environments.

Enables correlation IDs, structured data, and credential redaction.
"""

import logging
import re
import uuid
from typing import Optional
from contextvars import ContextVar

# Context-local correlation ID storage
_correlation_id: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)


class CredentialRedactionFilter(logging.Filter):
    """
    Security filter that redacts credentials from log messages.

    Prevents API secrets, API keys, signed payloads and signatures from
    leaking into logs, exception messages, or debug output.

    - Redacts Gemini API keys (account-/master- prefixed)
    - Redacts key=value style secrets
    - Truncates long base64 strings (signed payloads)
    - Truncates HMAC-SHA384 hex signatures (96 hex chars)

    Usage:
        >>> handler = logging.StreamHandler()
        >>> handler.addFilter(CredentialRedactionFilter())
        >>> logger.addHandler(handler)
    """

    API_KEY_PATTERN = re.compile(r'\b(account|master)-[A-Za-z0-9]{8,}')
    # Capture the prefix (secret=) to keep it, not the secret value
    API_SECRET_PATTERN = re.compile(
        r'((?:secret|password|api_key|apikey)["\']?\s*[:=]\s*["\']?)[A-Za-z0-9+/=_-]{8,}["\']?',
        re.IGNORECASE
    )
    SIGNATURE_PATTERN = re.compile(r'\b[0-9a-fA-F]{96}\b')
    BASE64_SECRET_PATTERN = re.compile(r'[A-Za-z0-9+/]{40,}={0,2}')

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Redact credentials from log record.

        Returns:
            Always True (record is never filtered out, just sanitized)
        """
        if record.msg:
            record.msg = self._redact_credentials(str(record.msg))

        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: self._redact_credentials(str(v))
                    for k, v in record.args.items()
                }
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self._redact_credentials(str(arg))
                    for arg in record.args
                )

        if record.exc_text:
            record.exc_text = self._redact_credentials(record.exc_text)

        return True

    def _redact_credentials(self, text: str) -> str:
        """
        Redact all credential patterns from text.

        Args:
            text: Text to redact

        Returns:
            Text with credentials redacted
        """
        if not text:
            return text

        text = self.API_SECRET_PATTERN.sub(r'\1[REDACTED]', text)
        text = self.API_KEY_PATTERN.sub(r'\1-[REDACTED]', text)
        text = self.SIGNATURE_PATTERN.sub('[REDACTED_SIGNATURE]', text)
        text = self.BASE64_SECRET_PATTERN.sub(lambda m: m.group(0)[:8] + '...[REDACTED]', text)

        return text


class CorrelationIdFilter(logging.Filter):
    """Attach the current correlation ID to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = _correlation_id.get()
        return True


class StructuredLogger:
    """
    Structured logger wrapper.

    Passes event fields as `extra` so the JSON formatter emits them as keys.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, event: str, message: Optional[str] = None, **fields) -> None:
        log_message = f"{event}: {message}" if message else event
        extra = {"event": event}
        extra.update(fields)
        self.logger.log(level, log_message, extra=extra)

    def debug(self, event: str, message: Optional[str] = None, **fields) -> None:
        self._log(logging.DEBUG, event, message, **fields)

    def info(self, event: str, message: Optional[str] = None, **fields) -> None:
        """
        Log info event.

        Example:
            >>> logger.info(
            ...     "session_added",
            ...     "Session registered",
            ...     session_id=7,
            ...     role="trader",
            ... )
        """
        self._log(logging.INFO, event, message, **fields)

    def warning(self, event: str, message: Optional[str] = None, **fields) -> None:
        self._log(logging.WARNING, event, message, **fields)

    def error(self, event: str, message: Optional[str] = None, **fields) -> None:
        self._log(logging.ERROR, event, message, **fields)


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for current context.

    Args:
        correlation_id: Correlation ID (generates one if None)

    Returns:
        The correlation ID set
    """
    if correlation_id is None:
        correlation_id = f"req_{uuid.uuid4().hex[:12]}"

    _correlation_id.set(correlation_id)
    return correlation_id


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear correlation ID from current context."""
    _correlation_id.set(None)


def get_logger(name: str) -> StructuredLogger:
    """Get structured logger instance."""
    return StructuredLogger(name)

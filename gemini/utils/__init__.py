"""Utility modules for Gemini client."""

from .numeric import to_decimal, format_decimal
from .structured_logging import (
    CredentialRedactionFilter,
    StructuredLogger,
    get_logger,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)

__all__ = [
    "to_decimal",
    "format_decimal",
    "CredentialRedactionFilter",
    "StructuredLogger",
    "get_logger",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]

"""
Response classification.

The venue uses one flat JSON object for error envelopes and for some
success payloads that also carry a "result" field. Bodies are probed for
the error envelope first and only then strictly decoded into the caller's
expected shape.
"""

from functools import lru_cache
from typing import Any, Optional, TypeVar
import logging

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from ..models import ErrorCapture
from ..exceptions import ApplicationError, DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class ResponseClassifier:
    """Two-phase decode: error probe, then strict decode."""

    def probe(self, raw_body: bytes) -> Optional[ErrorCapture]:
        """
        Lenient decode into the error envelope.

        Args:
            raw_body: Raw response body

        Returns:
            Captured fields, or None if the body is not an object with
            string (or null) result/reason/message fields
        """
        try:
            return ErrorCapture.model_validate_json(raw_body)
        except PydanticValidationError:
            return None

    def classify(self, raw_body: bytes, target: Any = dict) -> Any:
        """
        Classify body and decode it into target.

        Args:
            raw_body: Raw response body
            target: Expected type (pydantic model, list[...], dict, str, ...)

        Returns:
            Decoded value of type target

        Raises:
            ApplicationError: If body is an error envelope (result != "ok")
            DecodeError: If body does not match target
        """
        captured = self.probe(raw_body)
        if captured is not None and captured.is_error:
            raise ApplicationError(
                captured.message,
                reason=captured.reason,
                result=captured.result
            )

        try:
            return _adapter(target).validate_json(raw_body)
        except PydanticValidationError as e:
            logger.debug(f"Response did not match {target}: {e.error_count()} errors")
            raise DecodeError(
                f"Response does not match expected shape {getattr(target, '__name__', target)}",
                raw_body=raw_body
            )

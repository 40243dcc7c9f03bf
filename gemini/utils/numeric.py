"""
Numeric type utilities for Decimal precision.

Helper functions for converting order amounts and prices to the plain
decimal strings the venue expects, without float precision loss.
"""

from typing import Any, Optional
from decimal import Decimal, InvalidOperation
import logging

from ..exceptions import EncodingError

logger = logging.getLogger(__name__)


def to_decimal(value: Any, default: Optional[Decimal] = None) -> Optional[Decimal]:
    """
    Safely convert any value to Decimal.

    Args:
        value: Value to convert (str, int, float, Decimal, None)
        default: Default value if conversion fails (default: None)

    Returns:
        Decimal or default if conversion fails

    Examples:
        >>> to_decimal("0.65")
        Decimal('0.65')
        >>> to_decimal(100.50)
        Decimal('100.5')
        >>> to_decimal(None, Decimal("0"))
        Decimal('0')
    """
    if value is None:
        return default

    try:
        if isinstance(value, Decimal):
            return value
        elif isinstance(value, str):
            return Decimal(value)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            # Convert via string to avoid float precision loss
            return Decimal(str(value))
        else:
            logger.warning(f"Cannot convert {type(value)} to Decimal: {value}")
            return default
    except (ValueError, InvalidOperation) as e:
        logger.warning(f"Failed to convert {value} to Decimal: {e}")
        return default


def format_decimal(value: Any) -> str:
    """
    Format a number as the shortest plain decimal string.

    Examples:
        >>> format_decimal(1.0)
        '1'
        >>> format_decimal("100.50")
        '100.5'
        >>> format_decimal(Decimal("1E-8"))
        '0.00000001'

    Raises:
        EncodingError: If value is not a finite number
    """
    dec = to_decimal(value)
    if dec is None or not dec.is_finite():
        raise EncodingError(f"Cannot format {value!r} as a decimal amount")

    normalized = dec.normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")

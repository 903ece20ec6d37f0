"""Conversion of upstream decimal currency strings to integer cents."""

import re
from decimal import Decimal

from pizza_ordering.errors import ConversionError

# Upstream amounts always carry exactly two fractional digits.
_AMOUNT_RE = re.compile(r"-?[0-9]+\.[0-9]{2}")


def string_number_to_cents(value: str | Decimal) -> int:
    """Convert a two-decimal amount such as "2.99" to cents (299).

    The decimal separator is dropped and the remaining digits are parsed
    as an integer; no rounding or scaling takes place.

    Args:
        value: Amount as a string, or as a Decimal decoded from a JSON
            number literal.

    Returns:
        The amount in integer cents.

    Raises:
        ConversionError: If the value is not a well-formed two-decimal amount.
    """
    if isinstance(value, Decimal):
        text = str(value)
    elif isinstance(value, str):
        text = value
    else:
        raise ConversionError(value)

    if not _AMOUNT_RE.fullmatch(text):
        raise ConversionError(value)
    return int(text.replace(".", "", 1))

"""Decimal helpers for money values."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0.00")
CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """
    Coerce a loosely typed number into a Decimal.

    Floats go through ``str`` so that 10.005 stays 10.005 instead of
    its binary approximation. None and blank strings become 0.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Not a finite number: {value!r}")
        return value
    if isinstance(value, bool):
        raise TypeError(f"Not a number: {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return to_decimal(str(value))
    s = str(value).strip().replace(",", "")
    if not s:
        return Decimal("0")
    try:
        d = Decimal(s)
    except InvalidOperation as e:
        raise ValueError(f"Not a number: {value!r}") from e
    if not d.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return d


def round_money(value: Any) -> Decimal:
    """
    Round half-up to 2 decimal places.

    Raises:
        ValueError: If the value has too many digits to hold at cent precision.
    """
    try:
        return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Amount out of range: {value!r}") from e

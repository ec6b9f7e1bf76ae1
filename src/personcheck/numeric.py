"""Numeric kinds and conversions between them.

A target class may store its age as a Python ``int``, a ``float``, a
``Decimal``, or a fixed-width numpy scalar. The helpers here convert small
integer literals into the exact type a setter or parameter expects, and
convert whatever comes back into a plain ``int`` for comparison.

``bool`` is deliberately absent: it subclasses ``int`` but is never treated
as a number here.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum, auto
from typing import Any

import numpy as np

from .errors import UnsupportedNumericTypeError


class NumericKind(Enum):
    """Numeric representations eligible for coercion."""

    SHORT = auto()
    INT = auto()
    LONG = auto()
    FLOAT = auto()
    DOUBLE = auto()
    DECIMAL = auto()


NUMERIC_TYPES: dict[type, NumericKind] = {
    np.int16: NumericKind.SHORT,
    int: NumericKind.INT,
    np.int32: NumericKind.INT,
    np.int64: NumericKind.LONG,
    np.float32: NumericKind.FLOAT,
    float: NumericKind.DOUBLE,
    np.float64: NumericKind.DOUBLE,
    Decimal: NumericKind.DECIMAL,
}


def kind_of(tp: Any) -> NumericKind | None:
    """Return the numeric kind of type `tp`, or None if it is not numeric."""
    if not isinstance(tp, type):
        return None
    return NUMERIC_TYPES.get(tp)


def is_numeric(tp: Any) -> bool:
    """Return True if `tp` is one of the supported numeric types."""
    return kind_of(tp) is not None


def convert_to(tp: type, value: int) -> Any:
    """Convert the integer literal `value` into an instance of numeric type `tp`.

    Args:
        tp: Target type, e.g. ``int``, ``Decimal`` or ``numpy.int16``.
        value: Integer literal to convert.

    Returns:
        An instance whose exact type is `tp`.

    Raises:
        UnsupportedNumericTypeError: If `tp` is not a supported numeric type.
    """
    if not is_numeric(tp):
        raise UnsupportedNumericTypeError(getattr(tp, "__name__", repr(tp)))
    return tp(value)


def to_int(value: Any) -> int:
    """Convert a value of any supported numeric kind to a plain ``int``.

    Fractional values are truncated toward zero.

    Raises:
        UnsupportedNumericTypeError: If `value` is not of a supported numeric
            type, or is NaN or infinite.
    """
    if type(value) not in NUMERIC_TYPES:
        raise UnsupportedNumericTypeError(type(value).__name__)
    try:
        return int(value)
    except (ValueError, OverflowError) as exc:
        raise UnsupportedNumericTypeError(type(value).__name__) from exc


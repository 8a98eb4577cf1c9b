"""
Input coercion at the tree boundary.

Everything that enters the tree (construction items, insert/delete/find
arguments) passes through ``to_number`` first, so the recursive core only
ever compares numbers with numbers.
"""

import numbers
import re
from typing import Iterable, List

from .errors import ConversionError
from .node import Number


_INTEGER = re.compile(r"[+-]?\d[\d_]*")


def _check_nan(value: object, number: Number) -> Number:
    # NaN is the only value unequal to itself
    if number != number:
        raise ConversionError(value)
    return number


def _parse_text(value: object, text: str) -> Number:
    text = text.strip()
    if not text:
        raise ConversionError(value)
    try:
        return int(text)
    except ValueError as exc:
        # integer text past the interpreter's digit limit would become inf
        if _INTEGER.fullmatch(text):
            raise ConversionError(value) from exc
    try:
        number = float(text)
    except ValueError as exc:
        raise ConversionError(value) from exc
    return _check_nan(value, number)


def to_number(value: object) -> Number:
    """
    Convert ``value`` to a numeric key.

    Real numbers (including numpy scalars) pass through unchanged, strings
    and bytes are parsed as int then float, anything else goes through
    ``float()``. Booleans and NaN are rejected.

    Args:
        value: Arbitrary caller-supplied value

    Returns:
        The numeric key

    Raises:
        ConversionError: If the value has no numeric interpretation
    """
    if isinstance(value, bool) or getattr(getattr(value, "dtype", None), "kind", None) == "b":
        raise ConversionError(value)
    if isinstance(value, numbers.Real):
        return _check_nan(value, value)
    if isinstance(value, str):
        return _parse_text(value, value)
    if isinstance(value, (bytes, bytearray)):
        try:
            text = value.decode("ascii")
        except UnicodeDecodeError as exc:
            raise ConversionError(value) from exc
        return _parse_text(value, text)
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConversionError(value) from exc
    return _check_nan(value, number)


def process_items(items: Iterable[object]) -> List[Number]:
    """Convert every item, drop duplicates and sort ascending."""
    nums = [to_number(item) for item in items]
    return sorted(set(nums))

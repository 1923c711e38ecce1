"""Tolerant decoding of numeric fields.

The search API is inconsistent about numbers: the same field may arrive as a
JSON number in one response and as a numeric string in the next.  The
decoders here unify both encodings and collapse any other JSON shape
(null, boolean, object, array) to ``None``.

``TolerantInt`` and ``TolerantFloat`` wire the decoders into pydantic
models as ``BeforeValidator``\\ s.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BeforeValidator

from ..errors import DecodeError

# ASCII-only grammars; no surrounding whitespace, no digit separators
_INTEGER_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def decode_integer(value: Any) -> int | None:
    """Decode an unsigned integer from a JSON number or numeric string.

    Args:
        value: An already-parsed JSON value.

    Returns:
        The integer, or None when *value* is neither a number nor a string.

    Raises:
        DecodeError: If a number is negative or fractional, or a string
            is not an ASCII base-10 unsigned integer (optional leading ``+``).
    """
    if _is_number(value):
        if isinstance(value, float):
            if not value.is_integer():
                raise DecodeError(f"Expected an integer, got {value!r}")
            value = int(value)
        if value < 0:
            raise DecodeError(f"Expected an unsigned integer, got {value!r}")
        return value
    if isinstance(value, str):
        if not _INTEGER_RE.fullmatch(value):
            raise DecodeError(f"Invalid integer string {value!r}")
        return int(value)
    return None


def decode_float(value: Any) -> float | None:
    """Decode a float from a JSON number or numeric string.

    Args:
        value: An already-parsed JSON value.

    Returns:
        The float, or None when *value* is neither a number nor a string.

    Raises:
        DecodeError: If a number cannot be represented as a float, or a
            string does not parse as one.
    """
    if _is_number(value):
        try:
            return float(value)
        except OverflowError as e:
            raise DecodeError(f"Invalid numeric value {value!r}") from e
    if isinstance(value, str):
        if not _FLOAT_RE.fullmatch(value):
            raise DecodeError(f"Invalid float string {value!r}")
        return float(value)
    return None


TolerantInt = Annotated[int | None, BeforeValidator(decode_integer)]
TolerantFloat = Annotated[float | None, BeforeValidator(decode_float)]

"""Turning Python values into command argument byte strings."""

from __future__ import annotations

import math
from collections.abc import Mapping, Set
from decimal import Decimal
from enum import Enum, auto
from typing import Any, Protocol


class NumericBehavior(Enum):
    """How an argument behaves in a numeric context."""

    NON_NUMERIC = auto()
    NUMBER_IS_INTEGER = auto()
    NUMBER_IS_FLOAT = auto()


class _ArgSink(Protocol):
    def append(self, arg: bytes, /) -> None: ...


_BYTES_TYPES = (bytes, bytearray, memoryview)


def _format_exponent(exponent: int) -> str:
    return f"e-{-exponent}" if exponent < 0 else f"e{exponent}"


def _format_float(number: float) -> str:
    """Shortest round-trip text of a float, in a fixed layout."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "-inf" if number < 0 else "inf"
    sign = "-" if math.copysign(1.0, number) < 0 else ""
    if number == 0:
        return f"{sign}0.0"

    _, digit_tuple, exponent = Decimal(repr(abs(number))).as_tuple()
    digits = "".join(map(str, digit_tuple))
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    length = len(digits)
    point = length + exponent

    if exponent >= 0 and point <= 21:
        body = digits + "0" * exponent + ".0"
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * (-point) + digits
    elif length == 1:
        body = digits + _format_exponent(point - 1)
    else:
        body = f"{digits[0]}.{digits[1:]}" + _format_exponent(point - 1)
    return sign + body


def _ordered(items: Any) -> list[Any]:
    try:
        return sorted(items)
    except TypeError:
        return list(items)


def _ordered_items(mapping: Mapping[Any, Any]) -> list[tuple[Any, Any]]:
    try:
        return sorted(mapping.items(), key=lambda pair: pair[0])
    except TypeError:
        return list(mapping.items())


def write_redis_args(value: Any, out: _ArgSink) -> None:
    """Append the arguments ``value`` produces to ``out``.

    Lists, tuples and sets are flattened; mappings become key/value pairs
    in key order; ``None`` produces nothing.
    """
    if value is None:
        return
    if isinstance(value, bool):
        out.append(b"1" if value else b"0")
    elif isinstance(value, int):
        out.append(str(value).encode("ascii"))
    elif isinstance(value, float):
        out.append(_format_float(value).encode("ascii"))
    elif isinstance(value, str):
        out.append(value.encode("utf-8"))
    elif isinstance(value, _BYTES_TYPES):
        out.append(bytes(value))
    elif isinstance(value, (list, tuple)):
        for item in value:
            write_redis_args(item, out)
    elif isinstance(value, Set):
        for item in _ordered(value):
            write_redis_args(item, out)
    elif isinstance(value, Mapping):
        for key, item in _ordered_items(value):
            if not (is_single_arg(key) and is_single_arg(item)):
                raise ValueError(
                    "mapping keys and values must each be a single argument"
                )
            write_redis_args(key, out)
            write_redis_args(item, out)
    else:
        raise TypeError(
            f"cannot convert {type(value).__name__} to command arguments"
        )


def to_redis_args(value: Any) -> list[bytes]:
    """The list of argument byte strings ``value`` produces."""
    out: list[bytes] = []
    write_redis_args(value, out)
    return out


def describe_numeric_behavior(value: Any) -> NumericBehavior:
    """How ``value`` behaves in a numeric context."""
    if isinstance(value, bool):
        return NumericBehavior.NON_NUMERIC
    if isinstance(value, int):
        return NumericBehavior.NUMBER_IS_INTEGER
    if isinstance(value, float):
        return NumericBehavior.NUMBER_IS_FLOAT
    return NumericBehavior.NON_NUMERIC


def is_single_arg(value: Any) -> bool:
    """True if ``value`` produces exactly one argument by its shape.

    A list counts as single when it holds one single item; a tuple when it
    has exactly one element; sets and mappings when they have at most one
    entry; ``None`` never.
    """
    if value is None:
        return False
    if isinstance(value, tuple):
        return len(value) == 1
    if isinstance(value, list):
        return len(value) == 1 and is_single_arg(value[0])
    if isinstance(value, (Set, Mapping)):
        return len(value) <= 1
    return True
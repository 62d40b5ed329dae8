"""Low-level protocol values as returned by a server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _debug_str(text: str) -> str:
    """Quote and escape a string the way a debug dump shows it."""
    escapes = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
    parts = ['"']
    for ch in text:
        if ch in escapes:
            parts.append(escapes[ch])
        elif not ch.isprintable():
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


class Value:
    """Base class of every protocol value."""

    __slots__ = ()

    def looks_like_cursor(self) -> bool:
        """True if this is a two-item bulk of a data cursor and a bulk."""
        if not isinstance(self, Bulk) or len(self.items) != 2:
            return False
        cursor, payload = self.items
        return isinstance(cursor, Data) and isinstance(payload, Bulk)

    def as_sequence(self) -> tuple[Value, ...] | None:
        """The items if this value can be read as a sequence, else None."""
        if isinstance(self, Bulk):
            return self.items
        if isinstance(self, Nil):
            return ()
        return None

    def as_map_iter(self) -> Iterator[tuple[Value, Value]] | None:
        """An iterator of key/value pairs if this is a bulk, else None.

        A trailing unpaired item is dropped.
        """
        if not isinstance(self, Bulk):
            return None
        it = iter(self.items)
        return zip(it, it)


@dataclass(frozen=True, repr=False)
class Nil(Value):
    """A nil response."""

    def __repr__(self) -> str:
        return "nil"


@dataclass(frozen=True, repr=False)
class Int(Value):
    """An integer response."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Int value must be an integer")
        if not _I64_MIN <= self.value <= _I64_MAX:
            raise ValueError("Int value out of 64-bit signed range")

    def __repr__(self) -> str:
        return f"int({self.value})"


@dataclass(frozen=True, repr=False)
class Data(Value):
    """Arbitrary binary data."""

    value: bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, "value", bytes(self.value))
        elif not isinstance(self.value, bytes):
            raise TypeError("Data value must be bytes")

    def __repr__(self) -> str:
        try:
            text = self.value.decode("utf-8")
        except UnicodeDecodeError:
            return f"binary-data({list(self.value)!r})"
        return f"string-data('{_debug_str(text)}')"


@dataclass(frozen=True, repr=False)
class Bulk(Value):
    """A nested list of values."""

    items: tuple[Value, ...] = field(default=())

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, Value):
                raise TypeError("Bulk items must be Value instances")
        object.__setattr__(self, "items", items)

    def __repr__(self) -> str:
        return "bulk(" + ", ".join(repr(item) for item in self.items) + ")"


@dataclass(frozen=True, repr=False)
class Status(Value):
    """A status response."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("Status value must be a string")

    def __repr__(self) -> str:
        return f"status({_debug_str(self.value)})"


@dataclass(frozen=True, repr=False)
class Okay(Value):
    """The status response "OK"."""

    def __repr__(self) -> str:
        return "ok"
"""Fixed-point temperature values, parsed records and per-station tallies."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from functools import total_ordering

_MINUS = ord("-")
_DOT = ord(".")
_NEWLINE = ord("\n")
_ZERO = ord("0")
_NINE = ord("9")


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@total_ordering
@dataclass(frozen=True)
class MiniDec:
    """A signed value in tenths, stored as a sign flag and a magnitude."""

    is_positive: bool = True
    v: int = 0

    def __add__(self, other: MiniDec) -> MiniDec:
        if not isinstance(other, MiniDec):
            return NotImplemented
        if other.v == 0:
            return self
        if self.is_positive == other.is_positive:
            return MiniDec(self.is_positive, self.v + other.v)
        if self.v >= other.v:
            return MiniDec(self.is_positive, self.v - other.v)
        return MiniDec(not self.is_positive, other.v - self.v)

    def __lt__(self, other: MiniDec) -> bool:
        if not isinstance(other, MiniDec):
            return NotImplemented
        if self.is_positive != other.is_positive:
            return not self.is_positive
        if self.is_positive:
            return self.v < other.v
        return self.v > other.v

    def __str__(self) -> str:
        sign = "" if self.is_positive else "-"
        whole, tenth = divmod(self.v, 10)
        return f"{sign}{whole}.{tenth}"


def parse_value(data: bytes | str) -> MiniDec:
    """Parse a temperature such as ``-12.3`` or ``7`` into tenths.

    A minus sign anywhere makes the value negative, only the first digit
    after the decimal point is used, and other characters are ignored.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    is_positive = True
    magnitude = 0
    is_decimal = False
    for byte in data:
        if byte == _MINUS:
            is_positive = False
        elif byte == _DOT:
            is_decimal = True
        elif byte == _NEWLINE:
            break
        elif _ZERO <= byte <= _NINE:
            magnitude = magnitude * 10 + (byte - _ZERO)
            if is_decimal:
                break
    if not is_decimal:
        magnitude *= 10
    return MiniDec(is_positive, magnitude)


def parse_line(line: bytes | str) -> tuple[bytes, MiniDec]:
    """Split a ``station;value`` line into its key and parsed value."""
    if isinstance(line, str):
        line = line.encode("utf-8")
    separator = line.find(b";")
    if separator < 0:
        raise ValueError(f"no ';' separator in line {line!r}")
    return line[:separator], parse_value(line[separator + 1 :])


class Tally:
    """Minimum, maximum, sum and count of the values seen for one station."""

    __slots__ = ("minimum", "maximum", "total", "count")

    def __init__(self, value: MiniDec) -> None:
        self.minimum = value
        self.maximum = value
        self.total = value
        self.count = 1

    def add(self, value: MiniDec) -> None:
        """Account for one more value."""
        self.total = self.total + value
        self.count += 1
        if self.minimum > value:
            self.minimum = value
        if self.maximum < value:
            self.maximum = value

    def merge(self, other: Tally) -> None:
        """Fold another tally for the same station into this one."""
        self.total = self.total + other.total
        self.count += other.count
        if self.minimum > other.minimum:
            self.minimum = other.minimum
        if self.maximum < other.maximum:
            self.maximum = other.maximum

    def __repr__(self) -> str:
        return (
            f"Tally(minimum={self.minimum!r}, maximum={self.maximum!r}, "
            f"total={self.total!r}, count={self.count})"
        )

    def __str__(self) -> str:
        average = _f32(_f32(self.total.v) * _f32(0.1))
        average = _f32(average / _f32(self.count))
        if not self.total.is_positive:
            average = -average
        return f"{self.minimum}/{average:.1f}/{self.maximum}"
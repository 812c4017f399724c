"""Millisecond-resolution time spans as reported by the robot."""

from __future__ import annotations

import functools
import operator
from datetime import timedelta

_UINT64_MASK = (1 << 64) - 1
_ONE_MILLISECOND = timedelta(milliseconds=1)


@functools.total_ordering
class Duration:
    """An unsigned 64-bit count of milliseconds.

    Arithmetic wraps around modulo 2**64, like the unsigned counter it models.
    Division of a duration by a duration yields a plain integer, division by
    an integer yields a duration; both use integer division.
    """

    __slots__ = ("_milliseconds",)

    def __init__(self, milliseconds: int | timedelta | Duration = 0) -> None:
        if isinstance(milliseconds, Duration):
            value = milliseconds._milliseconds
        elif isinstance(milliseconds, timedelta):
            value = milliseconds // _ONE_MILLISECOND
        else:
            value = operator.index(milliseconds)
        self._milliseconds = value & _UINT64_MASK

    def to_sec(self) -> float:
        """Return the duration in seconds."""
        return self._milliseconds / 1000.0

    def to_msec(self) -> int:
        """Return the duration in milliseconds."""
        return self._milliseconds

    def to_timedelta(self) -> timedelta:
        """Return the duration as a :class:`datetime.timedelta`."""
        return timedelta(milliseconds=self._milliseconds)

    @staticmethod
    def _scalar(value: object) -> int | None:
        if isinstance(value, Duration):
            return None
        try:
            return operator.index(value)
        except TypeError:
            return None

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._milliseconds + other._milliseconds)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._milliseconds - other._milliseconds)

    def __mul__(self, other: object) -> Duration:
        factor = self._scalar(other)
        if factor is None:
            return NotImplemented
        return Duration(self._milliseconds * (factor & _UINT64_MASK))

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> Duration | int:
        if isinstance(other, Duration):
            return self._milliseconds // other._milliseconds
        divisor = self._scalar(other)
        if divisor is None:
            return NotImplemented
        return Duration(self._milliseconds // (divisor & _UINT64_MASK))

    __truediv__ = __floordiv__

    def __mod__(self, other: object) -> Duration:
        if isinstance(other, Duration):
            return Duration(self._milliseconds % other._milliseconds)
        divisor = self._scalar(other)
        if divisor is None:
            return NotImplemented
        return Duration(self._milliseconds % (divisor & _UINT64_MASK))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._milliseconds == other._milliseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._milliseconds < other._milliseconds

    def __hash__(self) -> int:
        return hash(self._milliseconds)

    def __int__(self) -> int:
        return self._milliseconds

    def __repr__(self) -> str:
        return f"Duration({self._milliseconds})"
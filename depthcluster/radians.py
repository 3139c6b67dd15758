"""Angles kept in radians, with degree helpers and tolerant comparisons."""

from __future__ import annotations

import math

# Machine epsilon of a single precision float, used for angle comparisons.
FLOAT_EPSILON = 1.1920928955078125e-07


class Radians:
    """An immutable angle stored in radians.

    An angle built without a value is marked invalid, mirroring an
    uninitialised angle.
    """

    __slots__ = ("_value", "_valid")

    def __init__(self, value: float | None = None, valid: bool | None = None) -> None:
        self._value = 0.0 if value is None else float(value)
        self._valid = (value is not None) if valid is None else bool(valid)

    @property
    def value(self) -> float:
        """The raw angle in radians."""
        return self._value

    @property
    def valid(self) -> bool:
        return self._valid

    @classmethod
    def from_radians(cls, value: float) -> Radians:
        return cls(value)

    @classmethod
    def from_degrees(cls, degrees: float) -> Radians:
        return cls(degrees * math.pi / 180.0)

    def to_degrees(self) -> float:
        return 180.0 * self._value / math.pi

    def normalized(self, start: Radians | None = None, end: Radians | None = None) -> Radians:
        """Return the angle shifted by whole spans into ``[start, end]``.

        The defaults are 0 and 360 degrees.
        """
        start = deg(0) if start is None else start
        end = deg(360) if end is None else end
        span = (end - start).value
        if span <= 0:
            raise ValueError("normalization range must have a positive span")
        value = self._value
        while value < start.value:
            value += span
        while value > end.value:
            value -= span
        return Radians(value)

    def floor(self) -> Radians:
        """Round the angle down to a whole number of degrees."""
        return Radians.from_degrees(math.floor(self.to_degrees()))

    def __add__(self, other: Radians) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians(self._value + other._value)

    def __sub__(self, other: Radians) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians(self._value - other._value)

    def __mul__(self, factor: float) -> Radians:
        if isinstance(factor, Radians):
            return NotImplemented
        return Radians(self._value * float(factor))

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Radians):
            return self._value / other._value
        return Radians(self._value / float(other))

    def __neg__(self) -> Radians:
        return Radians(-self._value)

    def __abs__(self) -> Radians:
        return Radians(abs(self._value))

    def __lt__(self, other: Radians) -> bool:
        if not isinstance(other, Radians):
            return NotImplemented
        return self._value < other._value - FLOAT_EPSILON

    def __gt__(self, other: Radians) -> bool:
        if not isinstance(other, Radians):
            return NotImplemented
        return self._value > other._value + FLOAT_EPSILON

    def __float__(self) -> float:
        return self._value

    def __repr__(self) -> str:
        state = "" if self._valid else ", valid=False"
        return f"Radians({self._value!r}{state})"


def rad(value: float) -> Radians:
    """An angle given in radians."""
    return Radians.from_radians(value)


def deg(value: float) -> Radians:
    """An angle given in degrees."""
    return Radians.from_degrees(value)
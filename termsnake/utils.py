"""Geometry primitives for the normalised game field."""

from __future__ import annotations

from dataclasses import dataclass
import math


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields ``inf``/``nan`` instead of raising."""

    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass
class Vec2:
    """A two dimensional vector in the ``[0, 1] x [0, 1]`` logical field.

    Arithmetic operators and the named helpers return new vectors, so ``+=``
    rebinds instead of changing a vector already stored in a trail. Only
    :meth:`rotate` mutates the receiver.
    """

    x: float
    y: float

    def copy(self) -> "Vec2":
        """Return a shallow copy of the vector."""

        return Vec2(self.x, self.y)

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, other: "Vec2") -> "Vec2":
        return Vec2(_divide(self.x, other.x), _divide(self.y, other.y))

    def length(self) -> float:
        """Return the Euclidean length of the vector."""

        return math.hypot(self.x, self.y)

    def rotate(self, angle: float) -> None:
        """Rotate the vector in place by ``angle`` radians."""

        self.x, self.y = self._rotated_components(angle)

    def rotated(self, angle: float) -> "Vec2":
        """Return a copy rotated by ``angle`` radians."""

        return Vec2(*self._rotated_components(angle))

    def _rotated_components(self, angle: float) -> tuple[float, float]:
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a

    def clamp(self, low: "Vec2", high: "Vec2") -> "Vec2":
        """Clamp each axis independently to the box spanned by ``low`` and ``high``."""

        return Vec2(
            max(low.x, min(high.x, self.x)),
            max(low.y, min(high.y, self.y)),
        )

    def round(self) -> "Vec2":
        """Round both axes to the nearest integer, halves away from zero."""

        return Vec2(_round_half_away(self.x), _round_half_away(self.y))

    def inside_rectangle(self, p1: "Vec2", p2: "Vec2") -> bool:
        """Return ``True`` if the point lies in the box ``[p1, p2]``, edges included."""

        return p1.x <= self.x <= p2.x and p1.y <= self.y <= p2.y

    def outside_rectangle(self, p1: "Vec2", p2: "Vec2") -> bool:
        # Unsatisfiable whenever p1 <= p2; not used for boundary handling.
        return self.x < p1.x and self.y < p1.y and self.x > p2.x and self.y > p2.y

    def to_tuple(self) -> tuple[float, float]:
        """Return the vector as an ``(x, y)`` tuple."""

        return self.x, self.y

from __future__ import annotations

from dataclasses import dataclass
import math
import random as _random
from typing import TYPE_CHECKING, Protocol

from .math import recip

if TYPE_CHECKING:
    import pyray as rl

NEAR_ZERO_EPSILON = 8e-8


class SupportsXY(Protocol):
    x: float
    y: float


def _rng(rng: _random.Random | None) -> _random.Random:
    if rng is None:
        return _random.Random()
    return rng


@dataclass(slots=True, frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vec2:
        return cls.splat(0.0)

    @classmethod
    def splat(cls, value: float) -> Vec2:
        return cls(value, value)

    @classmethod
    def from_xy(cls, value: SupportsXY) -> Vec2:
        return cls(x=value.x, y=value.y)

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2 | float) -> Vec2:
        if isinstance(other, Vec2):
            return self.mul_components(other)
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, scalar: float) -> Vec2:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vec2:
        # Division by zero follows IEEE: signed infinities (or NaN for 0/0), no exception.
        return self * recip(float(scalar))

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def mul_components(self, other: Vec2) -> Vec2:
        return Vec2(self.x * other.x, self.y * other.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def normalized(self) -> Vec2:
        """Unit vector with the same heading.

        Undefined for the zero vector: the result has NaN components. Guard
        with `near_zero()` first.
        """
        return self * recip(self.length())

    def near_zero(self) -> bool:
        return abs(self.x) < NEAR_ZERO_EPSILON and abs(self.y) < NEAR_ZERO_EPSILON

    def to_rl(self) -> rl.Vector2:
        import pyray as rl

        return rl.Vector2(self.x, self.y)

    @staticmethod
    def random(min_value: float, max_value: float, *, rng: _random.Random | None = None) -> Vec2:
        r = _rng(rng)
        span = max_value - min_value
        # Half-open: `max_value` itself is never drawn.
        return Vec2(min_value + span * r.random(), min_value + span * r.random())

    @staticmethod
    def random_in_unit_sphere(*, rng: _random.Random | None = None) -> Vec2:
        r = _rng(rng)
        while True:
            p = Vec2.random(-1.0, 1.0, rng=r)
            if p.length_sq() < 1.0:
                return p

    @staticmethod
    def random_unit_vector(*, rng: _random.Random | None = None) -> Vec2:
        r = _rng(rng)
        while True:
            p = Vec2.random_in_unit_sphere(rng=r)
            if not p.near_zero():
                return p.normalized()

    @staticmethod
    def random_in_hemisphere(normal: Vec2, *, rng: _random.Random | None = None) -> Vec2:
        p = Vec2.random_in_unit_sphere(rng=rng)
        if p.dot(normal) > 0.0:
            return p
        return -p

    @staticmethod
    def random_in_unit_disk(*, rng: _random.Random | None = None) -> Vec2:
        # Same sampling as the sphere variant; in 2D the unit sphere is the unit disk.
        return Vec2.random_in_unit_sphere(rng=rng)


@dataclass(slots=True, frozen=True)
class Rect:
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @classmethod
    def from_center(cls, center: SupportsXY, width: float, height: float) -> Rect:
        return cls(
            x=center.x - width * 0.5,
            y=center.y - height * 0.5,
            w=width,
            h=height,
        )

    @property
    def top_left(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def size(self) -> Vec2:
        return Vec2(self.w, self.h)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.w * 0.5, self.y + self.h * 0.5)

    def to_rl(self) -> rl.Rectangle:
        import pyray as rl

        return rl.Rectangle(self.x, self.y, self.w, self.h)

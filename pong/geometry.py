"""Vectors, integer rectangles and random helpers."""

import math
import random
from dataclasses import dataclass


@dataclass
class Vector2D:
    """A pair of floating point components."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle with integer coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @left.setter
    def left(self, value: int) -> None:
        self.x = value

    @property
    def right(self) -> int:
        return self.x + self.width

    @right.setter
    def right(self, value: int) -> None:
        self.x = value - self.width

    @property
    def top(self) -> int:
        return self.y

    @top.setter
    def top(self, value: int) -> None:
        self.y = value

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @bottom.setter
    def bottom(self, value: int) -> None:
        self.y = value - self.height

    @property
    def center_x(self) -> int:
        return self.x + self.width // 2

    @center_x.setter
    def center_x(self, value: int) -> None:
        self.x = value - self.width // 2

    @property
    def center_y(self) -> int:
        return self.y + self.height // 2

    @center_y.setter
    def center_y(self, value: int) -> None:
        self.y = value - self.height // 2

    def collides_with(self, other: "Rect") -> bool:
        """True when the two rectangles overlap."""
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )

    def move_center(self, x: int, y: int) -> None:
        """Place the rectangle so that its centre is at (x, y)."""
        self.center_x = x
        self.center_y = y


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _source(rng):
    return random if rng is None else rng


def random_choice(a: float, b: float, rng=None) -> float:
    """Return a or b at random; a when they are equal."""
    if a == b:
        return a
    return a if _source(rng).randrange(2) == 0 else b


def rand_int(low: int, high: int, rng=None) -> int:
    """Random integer in [low, high); raises ValueError when the range is empty."""
    return low + _source(rng).randrange(high - low)


def rand_float(low: float, high: float, rng=None) -> float:
    """Random float between low and high."""
    return low + _source(rng).random() * (high - low)
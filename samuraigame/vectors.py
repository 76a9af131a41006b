"""Small two-dimensional vector types used by the game."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class I2V:
    """Integer pair, used for pixel positions and sizes."""

    x: int = 0
    y: int = 0


@dataclass
class F2V:
    """Floating point pair with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize_in_place(self) -> None:
        """Scale the vector to unit length; a zero vector is left alone."""
        length = self.length()
        if length != 0.0:
            self.x /= length
            self.y /= length

    def __add__(self, other: F2V) -> F2V:
        return F2V(self.x + other.x, self.y + other.y)

    def __sub__(self, other: F2V) -> F2V:
        return F2V(self.x - other.x, self.y - other.y)

    def __mul__(self, other: F2V) -> F2V:
        return F2V(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: F2V) -> F2V:
        return F2V(self.x / other.x, self.y / other.y)


@dataclass
class Ray:
    """A ray with an origin and a unit-length direction."""

    origin: F2V
    direction: F2V

    def __post_init__(self) -> None:
        self.origin = F2V(self.origin.x, self.origin.y)
        self.direction = F2V(self.direction.x, self.direction.y)
        self.direction.normalize_in_place()

    @classmethod
    def from_to(cls, start: F2V, end: F2V) -> Ray:
        """Ray starting at ``start`` and pointing towards ``end``."""
        return cls(start, end - start)


@dataclass
class RaycastHit:
    """Result of a cast: the contact point, the surface normal and the distance."""

    point: F2V = field(default_factory=F2V)
    normal: F2V = field(default_factory=F2V)
    distance: float = 0.0
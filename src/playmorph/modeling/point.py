from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate with vector arithmetic."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def zero(cls) -> "Point":
        return cls(0.0, 0.0)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        if isinstance(scalar, Point):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def isclose(self, other: "Point", atol: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= atol and abs(self.y - other.y) <= atol

    def mirrored(self, axis_x: float) -> "Point":
        """Reflect across the vertical line ``x = axis_x``."""
        return Point(2.0 * axis_x - self.x, self.y)


__all__ = ["Point"]

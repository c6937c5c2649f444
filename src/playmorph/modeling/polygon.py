from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

import numpy as np

from .point import Point


def _require_point(value: Point | Sequence[float], label: str) -> Point:
    if isinstance(value, Point):
        return value
    try:
        arr = np.asarray(value, dtype=float).reshape(2)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label} must be a 2D coordinate.") from exc
    return Point(arr[0], arr[1])


def _orientation(a: np.ndarray, b: np.ndarray, c: np.ndarray, eps: float) -> int:
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if abs(cross) <= eps:
        return 0
    return 1 if cross > 0 else -1


def _on_segment(a: np.ndarray, b: np.ndarray, p: np.ndarray, eps: float) -> bool:
    return (
        min(a[0], b[0]) - eps <= p[0] <= max(a[0], b[0]) + eps
        and min(a[1], b[1]) - eps <= p[1] <= max(a[1], b[1]) + eps
    )


def _segments_intersect(p1: np.ndarray, p2: np.ndarray, q1: np.ndarray, q2: np.ndarray, eps: float) -> bool:
    o1 = _orientation(p1, p2, q1, eps)
    o2 = _orientation(p1, p2, q2, eps)
    o3 = _orientation(q1, q2, p1, eps)
    o4 = _orientation(q1, q2, p2, eps)
    if o1 != o2 and o3 != o4:
        return True
    if o1 == 0 and _on_segment(p1, p2, q1, eps):
        return True
    if o2 == 0 and _on_segment(p1, p2, q2, eps):
        return True
    if o3 == 0 and _on_segment(q1, q2, p1, eps):
        return True
    if o4 == 0 and _on_segment(q1, q2, p2, eps):
        return True
    return False


@dataclass(frozen=True)
class Polygon2D:
    """Closed polygon; the last vertex connects back to the first."""

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        pts = tuple(_require_point(p, "point") for p in self.points)
        if len(pts) < 3:
            raise ValueError("Polygon2D requires at least three points.")
        object.__setattr__(self, "points", pts)

    @classmethod
    def from_points(cls, points: Iterable[Point | Sequence[float]]) -> "Polygon2D":
        return cls(points=tuple(points))

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def vertices(self) -> np.ndarray:
        return np.array([[p.x, p.y] for p in self.points], dtype=float)

    def sample(self) -> np.ndarray:
        """Return the vertices with the first point repeated to close the loop."""
        verts = self.vertices()
        return np.vstack([verts, verts[:1]])

    def signed_area(self) -> float:
        """Shoelace area; positive for TL -> TR -> BR -> BL in y-down screen space."""
        verts = self.vertices()
        x = verts[:, 0]
        y = verts[:, 1]
        return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        verts = self.vertices()
        mins = verts.min(axis=0)
        maxs = verts.max(axis=0)
        return (float(mins[0]), float(maxs[0]), float(mins[1]), float(maxs[1]))

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.vertices())))

    def is_simple(self, eps: float = 1e-9) -> bool:
        """Return True when no two non-adjacent edges touch.

        Consecutive coincident vertices (a collapsed edge) are merged first, so
        a quad with two equal corners is judged as the triangle it draws.
        """
        verts = self.vertices()
        kept = [verts[0]]
        for vert in verts[1:]:
            if not np.allclose(vert, kept[-1], rtol=0.0, atol=eps):
                kept.append(vert)
        while len(kept) > 1 and np.allclose(kept[0], kept[-1], rtol=0.0, atol=eps):
            kept.pop()
        n = len(kept)
        if n < 3:
            return False

        edges = [(kept[i], kept[(i + 1) % n]) for i in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                if j == i + 1 or (i == 0 and j == n - 1):
                    continue
                if _segments_intersect(edges[i][0], edges[i][1], edges[j][0], edges[j][1], eps):
                    return False
        return True


__all__ = ["Polygon2D"]

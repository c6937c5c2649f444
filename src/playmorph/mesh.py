from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from playmorph._color import normalize_color
from playmorph.modeling.play_pause import OutlinePair
from playmorph.modeling.polygon import Polygon2D


@dataclass
class Polyline:
    points: np.ndarray
    closed: bool = False
    color: tuple[float, float, float, float] | None = None

    def __post_init__(self) -> None:
        self.points = np.asarray(self.points, dtype=float).reshape(-1, 3).copy()
        if self.color is not None and len(self.color) == 3:
            self.color = (self.color[0], self.color[1], self.color[2], 1.0)


def _to_world(polygon: Polygon2D, height: float, z: float) -> np.ndarray:
    # Screen space is y-down; flip so the glyph is upright with +y up.
    verts = polygon.vertices()
    world = np.column_stack([verts[:, 0], height - verts[:, 1], np.full(verts.shape[0], float(z))])
    return world


def outline_to_polylines(
    outline: OutlinePair,
    height: float,
    z: float = 0.0,
    color: Sequence[float] | str | None = None,
) -> list[Polyline]:
    rgba = None if color is None else normalize_color(color)
    polylines = []
    for polygon in outline:
        pts = _to_world(polygon, height, z)
        polylines.append(Polyline(np.vstack([pts, pts[:1]]), closed=True, color=rgba))
    return polylines


def polygon_faces(sizes: Iterable[int]) -> np.ndarray:
    """Return a VTK-style flat face array for consecutive polygons of the given sizes."""

    cells: list[int] = []
    offset = 0
    for size in sizes:
        cells.append(size)
        cells.extend(range(offset, offset + size))
        offset += size
    return np.asarray(cells, dtype=np.int64)


def outline_to_pyvista(outline: OutlinePair, height: float, z: float = 0.0):
    import pyvista as pv

    polygons = list(outline)
    vertices = np.vstack([_to_world(polygon, height, z) for polygon in polygons])
    faces = polygon_faces(len(polygon) for polygon in polygons)
    return pv.PolyData(vertices, faces, deep=True)


__all__ = ["Polyline", "outline_to_polylines", "outline_to_pyvista", "polygon_faces"]

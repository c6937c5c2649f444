"""Play/pause glyph geometry.

The glyph is drawn as two closed quads. At progress 0 they are the two halves
of a play triangle split on ``x = width / 2``; at progress 1 they are the two
bars of a pause sign. Every vertex moves on a straight line between its play
and pause position, so any frame is fully determined by eight control point
pairs derived from the bounding box.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from playmorph.validation import validate_bounds, validate_progress

from .morph import BlendDirection, CornerBlend, HalfBlend
from .point import Point
from .polygon import Polygon2D

BAR_WIDTH_FRACTION = 11.0 / 34.0


@dataclass(frozen=True)
class OutlinePair:
    """Left and right halves of the glyph, each a closed TL, TR, BR, BL quad."""

    left: Polygon2D
    right: Polygon2D

    def __iter__(self) -> Iterator[Polygon2D]:
        yield self.left
        yield self.right

    def as_array(self) -> np.ndarray:
        """Return a ``(2, 4, 2)`` array of vertices."""
        return np.stack([self.left.vertices(), self.right.vertices()])

    def is_finite(self) -> bool:
        return self.left.is_finite() and self.right.is_finite()

    def path_commands(self) -> list[tuple]:
        """Renderer-neutral path: one ``move``, three ``line`` and a ``close`` per half."""

        commands: list[tuple] = []
        for polygon in self:
            first, *rest = polygon.points
            commands.append(("move", first.x, first.y))
            for point in rest:
                commands.append(("line", point.x, point.y))
            commands.append(("close",))
        return commands

    def to_svg_path(self, precision: int = 3) -> str:
        parts: list[str] = []
        for command in self.path_commands():
            if command[0] == "move":
                parts.append(f"M {command[1]:.{precision}f} {command[2]:.{precision}f}")
            elif command[0] == "line":
                parts.append(f"L {command[1]:.{precision}f} {command[2]:.{precision}f}")
            else:
                parts.append("Z")
        return " ".join(parts)


@dataclass(frozen=True)
class GlyphControlPoints:
    width: float
    height: float
    pause_bar_width: float
    center_y: float
    left: HalfBlend
    right: HalfBlend

    @classmethod
    def from_bounds(cls, width: float, height: float) -> "GlyphControlPoints":
        width, height = validate_bounds(width, height)
        half_w = width * 0.5
        pause_bar_width = width * BAR_WIDTH_FRACTION

        if width > 0.0:
            # Slope of the upper play edge, evaluated at the centreline.
            m = (height * 0.5) / width
            center_y = (half_w * m) - (height * 0.5)
        else:
            # Limit of the expression above as width -> 0.
            center_y = -height * 0.25

        bar_x = (half_w - pause_bar_width) * 0.5
        apex_top = Point(half_w, -center_y)
        apex_bottom = Point(half_w, height + center_y)
        tip = Point(width, height * 0.5)

        left_pause_tl = Point(bar_x, 0.0)
        left_pause_tr = Point(left_pause_tl.x + pause_bar_width, 0.0)
        left = HalfBlend(
            top_left=CornerBlend(Point.zero(), left_pause_tl, BlendDirection.FORWARD),
            top_right=CornerBlend(apex_top, left_pause_tr),
            bottom_right=CornerBlend(apex_bottom, Point(left_pause_tr.x, height)),
            bottom_left=CornerBlend(Point(0.0, height), Point(bar_x, height)),
        )

        right_pause_tl = Point(left_pause_tl.x + half_w, left_pause_tl.y)
        right_pause_tr = Point(right_pause_tl.x + pause_bar_width, right_pause_tl.y)
        right = HalfBlend(
            top_left=CornerBlend(apex_top, right_pause_tl),
            top_right=CornerBlend(tip, right_pause_tr),
            bottom_right=CornerBlend(tip, Point(right_pause_tr.x, height)),
            bottom_left=CornerBlend(Point(apex_top.x, apex_bottom.y), Point(right_pause_tl.x, height)),
        )
        return cls(
            width=width,
            height=height,
            pause_bar_width=pause_bar_width,
            center_y=center_y,
            left=left,
            right=right,
        )

    def outline(self, progress: float) -> OutlinePair:
        progress = validate_progress(progress)
        return OutlinePair(left=self.left.polygon(progress), right=self.right.polygon(progress))


class ShapeInterpolator:
    """Stateless play/pause outline generator.

    Holds no per-call state; a single instance can be shared by any number of
    callers. Control points are rebuilt from the bounding box on every call.
    """

    bar_width_fraction = BAR_WIDTH_FRACTION

    def control_points(self, width: float, height: float) -> GlyphControlPoints:
        return GlyphControlPoints.from_bounds(width, height)

    def compute_outline(self, width: float, height: float, progress: float) -> OutlinePair:
        """Return the glyph outline for a ``width`` x ``height`` box at ``progress``.

        Progress outside ``[0, 1]`` is extrapolated linearly. Zero width gives a
        zero-area outline on ``x = 0``; negative or non-finite input raises
        :class:`~playmorph.validation.ValidationError`.
        """

        return self.control_points(width, height).outline(progress)

    __call__ = compute_outline


_DEFAULT_INTERPOLATOR = ShapeInterpolator()


def compute_outline(width: float, height: float, progress: float) -> OutlinePair:
    return _DEFAULT_INTERPOLATOR.compute_outline(width, height, progress)


__all__ = [
    "BAR_WIDTH_FRACTION",
    "GlyphControlPoints",
    "OutlinePair",
    "ShapeInterpolator",
    "compute_outline",
]

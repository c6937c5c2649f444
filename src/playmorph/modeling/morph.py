from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .point import Point
from .polygon import Polygon2D


class BlendDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


def blend_forward(play: Point, pause: Point, progress: float) -> Point:
    """Walk from the play point towards the pause point: ``play + (pause - play) * p``."""

    delta = pause - play
    return play + (delta * progress)


def blend_backward(play: Point, pause: Point, progress: float) -> Point:
    """Pull the play point back by the reversed delta: ``play - (play - pause) * p``."""

    delta = play - pause
    return play - (delta * progress)


@dataclass(frozen=True)
class CornerBlend:
    """One vertex of the glyph with its two fixed endpoint positions."""

    play: Point
    pause: Point
    direction: BlendDirection = BlendDirection.BACKWARD

    def at(self, progress: float) -> Point:
        if self.direction is BlendDirection.FORWARD:
            return blend_forward(self.play, self.pause, progress)
        return blend_backward(self.play, self.pause, progress)


@dataclass(frozen=True)
class HalfBlend:
    """Four corners of one half of the glyph, in drawing order."""

    top_left: CornerBlend
    top_right: CornerBlend
    bottom_right: CornerBlend
    bottom_left: CornerBlend

    @property
    def corners(self) -> tuple[CornerBlend, CornerBlend, CornerBlend, CornerBlend]:
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    def polygon(self, progress: float) -> Polygon2D:
        return Polygon2D(points=tuple(corner.at(progress) for corner in self.corners))

    def play_polygon(self) -> Polygon2D:
        return Polygon2D(points=tuple(corner.play for corner in self.corners))

    def pause_polygon(self) -> Polygon2D:
        return Polygon2D(points=tuple(corner.pause for corner in self.corners))


__all__ = [
    "BlendDirection",
    "CornerBlend",
    "HalfBlend",
    "blend_backward",
    "blend_forward",
]

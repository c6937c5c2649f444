"""Glyph geometry: points, closed polygons, and the play/pause interpolator."""

from __future__ import annotations

from .point import Point
from .polygon import Polygon2D
from .morph import BlendDirection, CornerBlend, HalfBlend, blend_backward, blend_forward
from .play_pause import (
    BAR_WIDTH_FRACTION,
    GlyphControlPoints,
    OutlinePair,
    ShapeInterpolator,
    compute_outline,
)

__all__ = [
    "Point",
    "Polygon2D",
    "BlendDirection",
    "CornerBlend",
    "HalfBlend",
    "blend_backward",
    "blend_forward",
    "BAR_WIDTH_FRACTION",
    "GlyphControlPoints",
    "OutlinePair",
    "ShapeInterpolator",
    "compute_outline",
]

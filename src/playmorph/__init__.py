"""playmorph – a play/pause toggle whose glyph morphs between triangle and bars."""

from __future__ import annotations

from .modeling.play_pause import OutlinePair, ShapeInterpolator, compute_outline

__all__ = ["__version__", "OutlinePair", "ShapeInterpolator", "compute_outline"]

__version__ = "0.1.0"

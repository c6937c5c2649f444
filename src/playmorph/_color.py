from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from PIL import ImageColor

RGBA = Tuple[float, float, float, float]


def normalize_color(color: Sequence[float] | str) -> RGBA:
    """Return an RGBA tuple in [0, 1] from a CSS color name, hex string, or RGB(A) sequence."""

    if isinstance(color, str):
        try:
            rgb = ImageColor.getrgb(color.strip())
        except ValueError as exc:
            raise ValueError(f"Unknown color {color!r}.") from exc
        arr = np.asarray(rgb, dtype=float) / 255.0
    else:
        arr = np.asarray(color, dtype=float).flatten()
        if arr.size not in (3, 4):
            raise ValueError("Color must be RGB or RGBA.")
        if arr.max() > 1.0:
            arr = arr / 255.0

    if np.any(~np.isfinite(arr)) or np.any(arr < 0.0) or np.any(arr > 1.0):
        raise ValueError("Color components must be within [0, 1] or [0, 255].")
    rgb = tuple(float(c) for c in arr[:3])
    alpha = float(arr[3]) if arr.size == 4 else 1.0
    return (rgb[0], rgb[1], rgb[2], alpha)


def to_rgba8(color: Sequence[float] | str) -> Tuple[int, int, int, int]:
    rgba = normalize_color(color)
    return tuple(int(round(c * 255.0)) for c in rgba)  # type: ignore[return-value]

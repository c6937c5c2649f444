"""Rasterize glyph outlines with Pillow."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

import numpy as np
from PIL import Image, ImageDraw

from playmorph._color import to_rgba8
from playmorph.animation import EasingFunction
from playmorph.modeling.play_pause import OutlinePair, ShapeInterpolator


def render_outline(
    outline: OutlinePair,
    width: int,
    height: int,
    color: Sequence[float] | str = "#34c759",
    background: Sequence[float] | str | None = None,
    scale: int = 4,
) -> Image.Image:
    """Fill both halves of ``outline`` into a ``width`` x ``height`` RGBA image.

    The outline is drawn ``scale`` times larger and downsampled, which gives
    cheap anti-aliased edges. ``background=None`` leaves the image transparent.
    """

    if width <= 0 or height <= 0:
        raise ValueError("Image size must be positive.")
    scale = max(int(scale), 1)
    fill = to_rgba8(color)
    bg = (0, 0, 0, 0) if background is None else to_rgba8(background)

    canvas = Image.new("RGBA", (width * scale, height * scale), bg)
    draw = ImageDraw.Draw(canvas)
    for polygon in outline:
        verts = polygon.vertices() * scale
        draw.polygon([(float(x), float(y)) for x, y in verts], fill=fill)

    if scale == 1:
        return canvas
    return canvas.resize((width, height), Image.Resampling.LANCZOS)


def render_frames(
    progresses: Iterable[float],
    size: int = 128,
    color: Sequence[float] | str = "#34c759",
    background: Sequence[float] | str | None = None,
    interpolator: ShapeInterpolator | None = None,
) -> List[Image.Image]:
    interpolator = interpolator or ShapeInterpolator()
    return [
        render_outline(interpolator.compute_outline(size, size, p), size, size, color=color, background=background)
        for p in progresses
    ]


def toggle_cycle_progresses(frames: int, easing: EasingFunction) -> np.ndarray:
    """Progress samples for one play -> pause -> play round trip."""

    frames = max(int(frames), 2)
    t = np.linspace(0.0, 1.0, frames, endpoint=True)
    forward = np.array([easing(float(v)) for v in t])
    # Skip the shared endpoints so the loop does not stall on them.
    backward = 1.0 - forward[1:-1]
    return np.concatenate([forward, backward])


def save_animation(frames: Sequence[Image.Image], path: Path, frame_ms: int = 40) -> Path:
    if not frames:
        raise ValueError("save_animation requires at least one frame.")
    path.parent.mkdir(parents=True, exist_ok=True)
    converted = [frame.convert("RGBA") for frame in frames]
    converted[0].save(
        path,
        save_all=True,
        append_images=converted[1:],
        duration=int(frame_ms),
        loop=0,
        disposal=2,
    )
    return path


__all__ = ["render_frames", "render_outline", "save_animation", "toggle_cycle_progresses"]

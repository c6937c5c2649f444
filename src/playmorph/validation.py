from __future__ import annotations

import math


class ValidationError(ValueError):
    """Raised when validation constraints are violated."""


def _require_real(value: float, label: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a number, not a bool.")
    if isinstance(value, (str, bytes)):
        raise ValidationError(f"{label} must be a number, not text.")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{label} must be a number.") from exc
    if not math.isfinite(number):
        raise ValidationError(f"{label} must be finite.")
    return number


def validate_bounds(width: float, height: float) -> tuple[float, float]:
    """Return ``(width, height)`` as floats, rejecting negative or non-finite sizes."""

    w = _require_real(width, "width")
    h = _require_real(height, "height")
    if w < 0.0 or h < 0.0:
        raise ValidationError("width and height must be non-negative.")
    return w, h


def validate_progress(progress: float) -> float:
    # Overshoot outside [0, 1] is allowed; only NaN/inf are rejected.
    return _require_real(progress, "progress")


def validate_duration(duration: float) -> float:
    value = _require_real(duration, "duration")
    if value < 0.0:
        raise ValidationError("duration must be non-negative.")
    return value

"""Easing curves and a time-driven progress ramp for the glyph morph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from playmorph.validation import validate_duration

EasingFunction = Callable[[float], float]


def _clamp01(t: float) -> float:
    return 0.0 if t < 0.0 else 1.0 if t > 1.0 else t


@dataclass(frozen=True)
class CubicBezierEasing:
    """Timing curve through (0, 0), (x1, y1), (x2, y2), (1, 1), as in CSS ``cubic-bezier``."""

    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.x1 <= 1.0 and 0.0 <= self.x2 <= 1.0):
            raise ValueError("cubic-bezier x control values must be in [0, 1].")

    @staticmethod
    def _coord(t: float, p1: float, p2: float) -> float:
        u = 1.0 - t
        return 3.0 * u * u * t * p1 + 3.0 * u * t * t * p2 + t * t * t

    def _slope_x(self, t: float) -> float:
        u = 1.0 - t
        return 3.0 * u * u * self.x1 + 6.0 * u * t * (self.x2 - self.x1) + 3.0 * t * t * (1.0 - self.x2)

    def _solve_t(self, x: float, eps: float = 1e-7) -> float:
        t = x
        for _ in range(8):
            err = self._coord(t, self.x1, self.x2) - x
            if abs(err) < eps:
                return t
            slope = self._slope_x(t)
            if abs(slope) < 1e-6:
                break
            t -= err / slope
            if t < 0.0 or t > 1.0:
                break

        lo, hi = 0.0, 1.0
        t = x
        while hi - lo > eps:
            if self._coord(t, self.x1, self.x2) < x:
                lo = t
            else:
                hi = t
            t = 0.5 * (lo + hi)
        return t

    def __call__(self, x: float) -> float:
        x = _clamp01(x)
        if x == 0.0 or x == 1.0:
            return x
        return self._coord(self._solve_t(x), self.y1, self.y2)


def linear(t: float) -> float:
    return _clamp01(t)


ease_in = CubicBezierEasing(0.42, 0.0, 1.0, 1.0)
ease_out = CubicBezierEasing(0.0, 0.0, 0.58, 1.0)
ease_in_out = CubicBezierEasing(0.42, 0.0, 0.58, 1.0)


def ease_out_back(t: float, overshoot: float = 1.70158) -> float:
    """Ease out past the target and settle back; peaks around 1.1."""
    t = _clamp01(t)
    c3 = overshoot + 1.0
    p = t - 1.0
    return 1.0 + c3 * p * p * p + overshoot * p * p


EASINGS: Dict[str, EasingFunction] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease_out_back": ease_out_back,
}

_EASING_ALIASES = {
    "easein": "ease_in",
    "easeout": "ease_out",
    "easeinout": "ease_in_out",
    "easeoutback": "ease_out_back",
    "back": "ease_out_back",
    "spring": "ease_out_back",
}


def normalize_easing_name(name: str) -> str | None:
    key = name.strip().lower().replace("-", "_")
    if key in EASINGS:
        return key
    return _EASING_ALIASES.get(key.replace("_", ""))


def get_easing(name: str) -> EasingFunction:
    normalized = normalize_easing_name(name)
    if normalized is None:
        valid = ", ".join(sorted(EASINGS))
        raise ValueError(f"Unknown easing {name!r}; expected one of: {valid}.")
    return EASINGS[normalized]


@dataclass(frozen=True)
class ProgressAnimation:
    """Ramp a progress value from ``start_value`` to ``end_value`` over ``duration`` seconds."""

    start_value: float
    end_value: float
    start_time: float
    duration: float = 0.3
    easing: EasingFunction = ease_in_out

    def __post_init__(self) -> None:
        object.__setattr__(self, "duration", validate_duration(self.duration))

    def fraction(self, now: float) -> float:
        if self.duration <= 0.0:
            return 1.0
        return _clamp01((now - self.start_time) / self.duration)

    def value_at(self, now: float) -> float:
        t = self.fraction(now)
        if t >= 1.0:
            return self.end_value
        eased = self.easing(t)
        return self.start_value + (self.end_value - self.start_value) * eased

    def is_complete(self, now: float) -> bool:
        return self.fraction(now) >= 1.0


__all__ = [
    "CubicBezierEasing",
    "EASINGS",
    "EasingFunction",
    "ProgressAnimation",
    "ease_in",
    "ease_in_out",
    "ease_out",
    "ease_out_back",
    "get_easing",
    "linear",
    "normalize_easing_name",
]

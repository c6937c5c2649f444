from __future__ import annotations

import numpy as np


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def outline_array(outline) -> np.ndarray:
    return np.asarray(outline.as_array(), dtype=float)

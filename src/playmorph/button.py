"""Toggle state and animated progress for the play/pause control."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

from playmorph.animation import EasingFunction, ProgressAnimation, get_easing
from playmorph.modeling.play_pause import OutlinePair, ShapeInterpolator
from playmorph.validation import validate_duration

Clock = Callable[[], float]


class PlaybackState(Enum):
    PAUSED = "paused"
    PLAYING = "playing"

    @property
    def target_progress(self) -> float:
        # Playing shows the pause bars.
        return 1.0 if self is PlaybackState.PLAYING else 0.0

    def toggled(self) -> "PlaybackState":
        return PlaybackState.PAUSED if self is PlaybackState.PLAYING else PlaybackState.PLAYING


class PlayButton:
    """Play/pause toggle that animates its glyph between the two states.

    The button owns two pieces of state: the playback state, flipped by
    :meth:`activate`, and a progress animation that eases the glyph towards
    the state's endpoint. Retoggling mid-flight starts the new ramp from the
    current progress so the glyph never jumps.
    """

    accessibility_traits = ("button",)

    def __init__(
        self,
        action: Callable[[], None] | None = None,
        duration: float = 0.3,
        easing: str | EasingFunction = "ease_in_out",
        clock: Clock = time.monotonic,
        interpolator: ShapeInterpolator | None = None,
    ) -> None:
        self._action = action
        self.duration = validate_duration(duration)
        self.easing = get_easing(easing) if isinstance(easing, str) else easing
        self._clock = clock
        self._interpolator = interpolator or ShapeInterpolator()
        self._state = PlaybackState.PAUSED
        self._animation: ProgressAnimation | None = None

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is PlaybackState.PLAYING

    @property
    def accessibility_label(self) -> str:
        return "Pause" if self.is_playing else "Play"

    def _now(self, now: float | None) -> float:
        return self._clock() if now is None else float(now)

    def progress(self, now: float | None = None) -> float:
        if self._animation is None:
            return self._state.target_progress
        return self._animation.value_at(self._now(now))

    def is_animating(self, now: float | None = None) -> bool:
        if self._animation is None:
            return False
        return not self._animation.is_complete(self._now(now))

    def activate(self) -> PlaybackState:
        """Toggle playback, start the glyph animation, then fire the action."""

        now = self._clock()
        current = self.progress(now)
        self._state = self._state.toggled()
        self._animation = ProgressAnimation(
            start_value=current,
            end_value=self._state.target_progress,
            start_time=now,
            duration=self.duration,
            easing=self.easing,
        )
        if self._action is not None:
            self._action()
        return self._state

    def tap(self) -> PlaybackState:
        return self.activate()

    def accessibility_action(self) -> PlaybackState:
        return self.activate()

    def outline(self, width: float, height: float, now: float | None = None) -> OutlinePair:
        return self._interpolator.compute_outline(width, height, self.progress(now))

from __future__ import annotations

from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.panel import Panel

from playmorph._color import normalize_color
from playmorph._config import ButtonSettings, get_button_settings
from playmorph.button import PlayButton
from playmorph.mesh import outline_to_pyvista
from playmorph.modeling.play_pause import compute_outline


class PreviewBackendError(RuntimeError):
    """Raised when a preview backend cannot run."""


class FrameTracker:
    """Redraw on a timer tick only when the glyph progress has moved.

    The tick after a ramp completes still sees a new value (the exact
    endpoint), so the settled frame is always drawn once.
    """

    def __init__(self) -> None:
        self.last_drawn: float | None = None

    def mark_drawn(self, progress: float) -> None:
        self.last_drawn = progress

    def step(self, button: PlayButton, draw: Callable[[float], None], now: float | None = None) -> bool:
        progress = button.progress(now)
        if self.last_drawn is not None and progress == self.last_drawn:
            return False
        draw(progress)
        self.last_drawn = progress
        return True


class PlayButtonPreviewer:
    """Show a play button in a PyVista window; space toggles it."""

    def __init__(self, console: Console | None, settings: ButtonSettings | None = None):
        self.console = console
        self._pv = None
        self._settings = settings or get_button_settings()

    @property
    def settings(self) -> ButtonSettings:
        return self._settings

    def make_button(self, action: Callable[[], None] | None = None) -> PlayButton:
        return PlayButton(action=action, duration=self._settings.duration, easing=self._settings.easing)

    def show(
        self,
        button: PlayButton | None = None,
        size: float | None = None,
        target_fps: int | None = None,
        screenshot_path: Path | None = None,
    ) -> None:
        pv = self._ensure_backend()
        size = float(size or self._settings.size)
        target_fps = int(target_fps or self._settings.fps)
        if button is None:
            button = self.make_button(action=self._announce)

        plotter = pv.Plotter(window_size=(640, 640))
        self._configure_plotter(plotter)
        frames = FrameTracker()

        def draw(progress: float) -> None:
            self._apply_outline(plotter, button, size, progress)
            plotter.render()

        self._apply_outline(plotter, button, size, button.progress())
        frames.mark_drawn(button.progress())
        plotter.view_xy()
        plotter.reset_camera()

        if screenshot_path is not None:
            screenshot_path.parent.mkdir(parents=True, exist_ok=True)
            plotter.show(title="Play Button Preview", auto_close=True, screenshot=str(screenshot_path))
            plotter.close()
            return

        def toggle() -> None:
            button.tap()
            frames.step(button, draw)

        plotter.add_key_event("space", toggle)

        def tick() -> None:
            frames.step(button, draw)

        def guarded_tick() -> None:
            try:
                tick()
            except Exception as exc:  # pragma: no cover - surfaced via console
                if self.console is not None:
                    self.console.print(Panel.fit(str(exc), title="Frame update failed", style="red"))
                raise

        interval_seconds = max(1.0 / max(target_fps, 1), 0.01)
        cleanup = self._install_timer_callback(plotter, guarded_tick, interval_seconds)
        if self.console is not None:
            self.console.print("[cyan]Press space to toggle play/pause, close the window to stop.[/cyan]")
        try:
            plotter.show(title="Play Button Preview", auto_close=False)
        finally:
            cleanup()
            plotter.close()

    # Internal helpers -----------------------------------------------------

    def _announce(self) -> None:
        if self.console is not None:
            self.console.print("[green]Toggled[/green]")

    def _ensure_backend(self):
        if self._pv is None:
            try:
                import pyvista as pv
            except ImportError as exc:  # pragma: no cover - runtime dep
                raise PreviewBackendError(
                    "PyVista is required for previewing. Install playmorph with `pip install -e .`."
                ) from exc
            pv.set_plot_theme("document")
            self._pv = pv
        return self._pv

    def _configure_plotter(self, plotter) -> None:
        plotter.set_background("#090c10", top="#1b2333")

    def _apply_outline(self, plotter, button: PlayButton, size: float, progress: float) -> None:
        mesh = outline_to_pyvista(compute_outline(size, size, progress), height=size)
        rgb = normalize_color(self._settings.color)[:3]
        plotter.add_mesh(mesh, name="glyph", color=rgb, show_edges=False, reset_camera=False)
        plotter.add_text(button.accessibility_label, name="label", position="upper_left", font_size=12)

    def _install_timer_callback(
        self,
        plotter,
        callback: Callable[[], None],
        interval_seconds: float,
    ):
        """Install a repeating timer callback compatible with the current PyVista backend."""

        interactor = getattr(plotter, "iren", None)
        if interactor is None:
            raise PreviewBackendError("PyVista interactor unavailable; cannot attach timer callbacks.")

        duration_ms = max(int(interval_seconds * 1000), 10)
        timer_id = interactor.create_timer(duration=duration_ms, repeating=True)

        def timer_handler(*_: object) -> None:
            callback()

        observer_id = interactor.add_observer("TimerEvent", timer_handler)

        def cleanup() -> None:
            if observer_id is not None:
                interactor.remove_observer(observer_id)
            destroy_timer = getattr(interactor, "destroy_timer", None)
            if timer_id is not None and callable(destroy_timer):
                destroy_timer(timer_id)

        return cleanup

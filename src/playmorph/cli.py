from __future__ import annotations

import pathlib

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from playmorph._config import ButtonSettings, get_button_settings
from playmorph.animation import get_easing
from playmorph.modeling.play_pause import ShapeInterpolator
from playmorph.preview import PlayButtonPreviewer, PreviewBackendError
from playmorph.raster import render_frames, render_outline, save_animation, toggle_cycle_progresses
from playmorph.validation import ValidationError

console = Console()
app = typer.Typer(help="Compute, render and preview the morphing play/pause glyph.")

_CORNERS = ("top-left", "top-right", "bottom-right", "bottom-left")


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _resolve_output(output: pathlib.Path, overwrite: bool) -> pathlib.Path:
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")
        return final_output
    return output


def _settings() -> ButtonSettings:
    return get_button_settings()


@app.command()
def outline(
    width: float = typer.Argument(..., help="Bounding box width."),
    height: float = typer.Argument(..., help="Bounding box height."),
    progress: float = typer.Argument(..., help="0 = play triangle, 1 = pause bars; overshoot allowed."),
    svg: bool = typer.Option(False, "--svg", help="Print an SVG path instead of a vertex table."),
) -> None:
    """
    Print the glyph vertices for one bounding box and progress value.
    """

    try:
        result = ShapeInterpolator().compute_outline(width, height, progress)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if svg:
        console.print(result.to_svg_path(), highlight=False, soft_wrap=True)
        return

    table = Table(title=f"Outline {width:g} x {height:g} @ {progress:g}")
    table.add_column("half")
    table.add_column("corner")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for half, polygon in (("left", result.left), ("right", result.right)):
        for corner, point in zip(_CORNERS, polygon):
            table.add_row(half, corner, f"{point.x:.4f}", f"{point.y:.4f}")
    console.print(table)


@app.command()
def render(
    output: pathlib.Path = typer.Argument(..., help="PNG file to write."),
    progress: float = typer.Option(0.0, "--progress", "-p", help="Morph progress to draw."),
    size: int | None = typer.Option(None, "--size", min=1, help="Image edge in pixels (defaults to config)."),
    color: str | None = typer.Option(None, "--color", help="Fill color (defaults to config)."),
    background: str | None = typer.Option(None, "--background", help="Background color; transparent if omitted."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Render a single frame of the glyph to a PNG.
    """

    settings = _settings()
    size = size or settings.size
    try:
        shape = ShapeInterpolator().compute_outline(size, size, progress)
        image = render_outline(shape, size, size, color=color or settings.color, background=background)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    final_output = _resolve_output(output, overwrite)
    final_output.parent.mkdir(parents=True, exist_ok=True)
    image.save(final_output)
    console.print(
        Panel(
            f"Wrote {size}x{size} frame at progress {progress:g} to [green]{final_output}[/green].",
            title="Render complete",
            border_style="green",
        )
    )


@app.command()
def animate(
    output: pathlib.Path = typer.Argument(..., help="GIF file to write."),
    size: int | None = typer.Option(None, "--size", min=1, help="Image edge in pixels (defaults to config)."),
    frames: int = typer.Option(24, "--frames", min=2, max=600, help="Frames per transition."),
    easing: str | None = typer.Option(None, "--easing", help="Easing curve name (defaults to config)."),
    duration: float | None = typer.Option(None, "--duration", min=0.0, help="Seconds per transition."),
    color: str | None = typer.Option(None, "--color", help="Fill color (defaults to config)."),
    background: str | None = typer.Option(None, "--background", help="Background color; transparent if omitted."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Write an animated GIF of one play -> pause -> play toggle cycle.
    """

    settings = _settings()
    size = size or settings.size
    seconds = settings.duration if duration is None else duration
    try:
        curve = get_easing(easing or settings.easing)
        progresses = toggle_cycle_progresses(frames, curve)
        images = render_frames(progresses, size=size, color=color or settings.color, background=background)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    frame_ms = max(int(round(seconds * 1000.0 / frames)), 10)
    final_output = _resolve_output(output, overwrite)
    save_animation(images, final_output, frame_ms=frame_ms)
    console.print(
        Panel(
            f"Wrote {len(images)} frames ({frame_ms} ms each) to [green]{final_output}[/green].",
            title="Animation complete",
            border_style="green",
        )
    )


@app.command()
def preview(
    size: int | None = typer.Option(None, "--size", min=1, help="Glyph edge in world units (defaults to config)."),
    target_fps: int | None = typer.Option(None, min=1, max=240, help="Animation framerate budget."),
    screenshot: pathlib.Path | None = typer.Option(
        None, "--screenshot", help="Optional path to save a screenshot of the preview."
    ),
) -> None:
    """
    Open an interactive PyVista window with the play button; press space to toggle.
    """

    console.rule("Play Button Preview")
    previewer = PlayButtonPreviewer(console=console)
    settings = previewer.settings
    console.print(f"[magenta]Animation: {settings.easing}, {settings.duration:g}s.[/magenta]")
    try:
        previewer.show(size=size, target_fps=target_fps, screenshot_path=screenshot)
    except (PreviewBackendError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def main() -> None:
    app()

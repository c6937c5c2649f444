"""Open a 128 x 128 green play button; every toggle prints a greeting."""

from __future__ import annotations

from rich.console import Console

from playmorph.button import PlayButton
from playmorph.preview import PlayButtonPreviewer


def main() -> None:
    console = Console()
    previewer = PlayButtonPreviewer(console=console)
    button = PlayButton(
        action=lambda: console.print("Hello World"),
        duration=previewer.settings.duration,
        easing=previewer.settings.easing,
    )
    previewer.show(button=button, size=128)


if __name__ == "__main__":
    main()

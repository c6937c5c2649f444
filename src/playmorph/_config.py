from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from playmorph.animation import normalize_easing_name

CONFIG_DIR_ENV = "PLAYMORPH_CONFIG_DIR"
CONFIG_FILENAME = "playmorph.cfg"
DEFAULT_CONFIG: Dict[str, Any] = {
    "_comment": (
        "Valid easings: linear, ease_in, ease_out, ease_in_out (default), ease_out_back. "
        "Duration is in seconds; size is the rendered button edge in pixels."
    ),
    "duration": 0.3,
    "easing": "ease_in_out",
    "color": "#34c759",
    "size": 128,
    "fps": 60,
}


@dataclass(frozen=True)
class ButtonSettings:
    """Resolved play button settings from playmorph.cfg."""

    duration: float
    easing: str
    color: str
    size: int
    fps: int


def config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".playmorph"


def config_file() -> Path:
    return config_dir() / CONFIG_FILENAME


def ensure_user_config() -> None:
    """Ensure playmorph.cfg exists with sane defaults."""

    directory = config_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    path = directory / CONFIG_FILENAME
    if path.exists():
        return

    try:
        path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        loaded = json.loads(config_file().read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(loaded, dict):
        return DEFAULT_CONFIG.copy()
    return loaded


def _positive_float(value: Any, default: float, allow_zero: bool = False) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or number < 0.0 or (number == 0.0 and not allow_zero):
        return default
    return number


def _positive_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def get_button_settings() -> ButtonSettings:
    """Return the configured animation and rendering defaults."""

    raw_config = _load_user_config()

    easing = normalize_easing_name(str(raw_config.get("easing", DEFAULT_CONFIG["easing"])))
    if easing is None:
        easing = DEFAULT_CONFIG["easing"]

    color = raw_config.get("color", DEFAULT_CONFIG["color"])
    if not isinstance(color, str) or not color.strip():
        color = DEFAULT_CONFIG["color"]

    return ButtonSettings(
        duration=_positive_float(raw_config.get("duration"), DEFAULT_CONFIG["duration"], allow_zero=True),
        easing=easing,
        color=color.strip(),
        size=_positive_int(raw_config.get("size"), DEFAULT_CONFIG["size"]),
        fps=_positive_int(raw_config.get("fps"), DEFAULT_CONFIG["fps"]),
    )

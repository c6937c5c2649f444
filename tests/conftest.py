from __future__ import annotations

import os
from pathlib import Path

import pytest

from playmorph._config import CONFIG_DIR_ENV

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure():
    os.environ.setdefault("PYVISTA_OFF_SCREEN", "true")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config loader at a per-test directory instead of ~/.playmorph."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    return config_dir


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT

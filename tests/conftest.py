"""Global test fixtures for termchart."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from termchart.terminal import TerminalSize, fixed_terminal_size


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep user config, project config and env vars out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("TERMCHART_WIDTH", "TERMCHART_HEIGHT", "TERMCHART_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def terminal() -> TerminalSize:
    """A 100x30 terminal."""
    return fixed_terminal_size(100, 30)


@pytest.fixture
def bar_data() -> list[dict[str, Any]]:
    return [
        {"key": "A", "value": 5},
        {"key": "B", "value": 3},
        {"key": "C", "value": 11},
        {"key": "D", "value": 1},
    ]


@pytest.fixture
def pie_data() -> list[dict[str, Any]]:
    return [
        {"key": "A", "value": 5, "style": "*"},
        {"key": "B", "value": 10, "style": "+"},
        {"key": "C", "value": 10, "style": "#"},
        {"key": "D", "value": 10, "style": "O"},
    ]

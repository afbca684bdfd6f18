"""Configuration loading and management."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from termchart.terminal import TerminalSize, default_terminal_size, fixed_terminal_size

# Load .env files
load_dotenv()

# Config directory names
PROJECT_DIR = ".termchart"
USER_DIR_NAME = ".termchart"

CONFIG_FILES = ("config.yaml", "config.yml", "config.json")


@dataclass(slots=True)
class TermchartConfig:
    """Merged configuration from all sources.

    Priority: CLI args > env vars > project config > user config > defaults
    """
    # Terminal size override; None falls back to the real terminal
    width: int | None = None
    height: int | None = None

    debug: bool = False

    # Per-chart option defaults, e.g. {"bar": {"bar_width": 4}}
    charts: dict[str, dict[str, Any]] = field(default_factory=dict)

    def chart_options(self, chart: str) -> dict[str, Any]:
        """Configured option defaults for *chart* (a copy)."""
        return dict(self.charts.get(chart, {}))

    def terminal_size(self) -> TerminalSize:
        """Terminal size provider honouring the width/height overrides."""
        if self.width is None and self.height is None:
            return default_terminal_size
        columns, lines = default_terminal_size()
        return fixed_terminal_size(
            self.width if self.width is not None else columns,
            self.height if self.height is not None else lines,
        )


def find_project_root(start: Path | None = None) -> Path | None:
    """Find the project root by looking for .termchart/ or .git/."""
    current = start or Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / PROJECT_DIR).exists():
            return parent
        if (parent / ".git").exists():
            return parent
    return None


def get_user_config_dir() -> Path:
    """Get the user-level config directory (~/.termchart/)."""
    return Path.home() / USER_DIR_NAME


def load_json_config(path: Path) -> dict[str, Any]:
    """Load a JSON config file, returning empty dict if not found."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (json.JSONDecodeError, OSError):
        return {}


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load a YAML config file, returning empty dict if not found."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (yaml.YAMLError, OSError):
        return {}


def load_config_dir(directory: Path) -> dict[str, Any]:
    """Load the first config file present in *directory*."""
    for name in CONFIG_FILES:
        path = directory / name
        if path.exists():
            if path.suffix == ".json":
                return load_json_config(path)
            return load_yaml_config(path)
    return {}


def load_config(
    *,
    cli_args: dict[str, Any] | None = None,
    working_dir: str | None = None,
) -> TermchartConfig:
    """Load configuration from all sources with proper priority.

    Priority: CLI args > env vars > project config > user config > defaults
    """
    config = TermchartConfig()
    cli_args = cli_args or {}

    # 1. User-level config (~/.termchart/config.yaml)
    _apply_dict(config, load_config_dir(get_user_config_dir()))

    # 2. Project-level config (.termchart/config.yaml)
    project_root = find_project_root(Path(working_dir or os.getcwd()))
    if project_root:
        _apply_dict(config, load_config_dir(project_root / PROJECT_DIR))

    # 3. Environment variables
    if (width := _env_int("TERMCHART_WIDTH")) is not None:
        config.width = width
    if (height := _env_int("TERMCHART_HEIGHT")) is not None:
        config.height = height
    if debug := os.environ.get("TERMCHART_DEBUG"):
        config.debug = debug.lower() in ("1", "true", "yes")

    # 4. CLI args (highest priority)
    _apply_dict(config, cli_args)

    return config


def _env_int(name: str) -> int | None:
    """Integer value of env var *name*; unset or malformed gives None."""
    return _as_int(os.environ.get(name))


def _as_int(value: Any) -> int | None:
    """*value* as an int, or None unless it is an integer or an integer string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _apply_dict(config: TermchartConfig, data: dict[str, Any]) -> None:
    """Apply dictionary values to config, only for known fields."""
    size_fields = {
        "width": "width",
        "height": "height",
        # Aliases from JSON config
        "terminalWidth": "width",
        "terminalHeight": "height",
    }
    for key, attr in size_fields.items():
        if (value := _as_int(data.get(key))) is not None:
            setattr(config, attr, value)
    if isinstance(data.get("debug"), bool):
        config.debug = data["debug"]

    charts = data.get("charts")
    if isinstance(charts, dict):
        for chart, options in charts.items():
            if isinstance(options, dict):
                config.charts.setdefault(chart, {}).update(options)

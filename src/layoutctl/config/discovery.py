"""Locate the layout project a command runs in.

A project is the nearest directory, walking up from the CWD, that holds a
``layoutctl.toml`` or a ``.layoutctl/`` directory of template overrides.
The config file is optional: an override directory alone is enough for
``export --document`` to pick up a custom page template from a subfolder.

``LAYOUTCTL_CONFIG`` (and ``--config``) name a config file directly and
skip the walk.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from layoutctl.config.models import LayoutConfig

CONFIG_FILENAME = "layoutctl.toml"
CONFIG_ENV_VAR = "LAYOUTCTL_CONFIG"
PROJECT_DIRNAME = ".layoutctl"


def _ancestors(start: Path | None) -> Iterator[Path]:
    current = (start or Path.cwd()).resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the layoutctl.toml governing *start* (default: cwd), if any.

    ``LAYOUTCTL_CONFIG`` wins when set; a missing file there means no config
    rather than a fallback to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    for directory in _ancestors(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_project_root(start: Path | None = None) -> Path | None:
    """Nearest directory holding layoutctl.toml or a ``.layoutctl/`` directory."""
    for directory in _ancestors(start):
        if (directory / CONFIG_FILENAME).is_file() or (directory / PROJECT_DIRNAME).is_dir():
            return directory
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> LayoutConfig:
    """Validate the sections of *path* (or the discovered file) into LayoutConfig.

    No file means an all-defaults config.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return LayoutConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return LayoutConfig.model_validate(data)

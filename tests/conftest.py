"""Shared pytest fixtures and test helpers for layoutctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from layoutctl.config.settings import LayoutSettings
from layoutctl.domain.modules import find_module
from layoutctl.domain.node import LayoutNode
from layoutctl.services.session import EditorSession


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's LAYOUTCTL_* environment out of the tests."""
    monkeypatch.delenv("LAYOUTCTL_CONFIG", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> LayoutSettings:
    """Settings rooted at an empty temp project (no layoutctl.toml)."""
    return LayoutSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def session(settings: LayoutSettings) -> EditorSession:
    """Fresh editing session without plugins."""
    return EditorSession(settings)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project so the CLI never picks up a stray config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def split(node: LayoutNode, key: str) -> tuple[LayoutNode, ...]:
    """Split *node* with the catalog preset *key*."""
    return node.split(find_module(key))


def drop(session: EditorSession, path: str, key: str) -> dict[str, object]:
    """Drop via the session, asserting success."""
    result = session.drop(path, key)
    assert result.ok, result.error
    return result.data

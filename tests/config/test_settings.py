"""Tests for LayoutSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from layoutctl.config.settings import LayoutSettings
from layoutctl.domain.markup import DEFAULT_PLACEHOLDER


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.export.placeholder == DEFAULT_PLACEHOLDER
        assert settings.export.indent == 2
        assert settings.plugins.enabled is True
        assert settings.mcp.transport == "stdio"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "layoutctl.toml").write_text('[export]\nplaceholder = "Empty"\n')
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert settings.export.placeholder == "Empty"
        assert settings.export.indent == 2  # default preserved
        assert settings.config_path == (tmp_path / "layoutctl.toml").resolve()

    def test_walk_up_sets_project_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "layoutctl.toml").write_text("[mcp]\ntransport = \"sse\"\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = LayoutSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()
        assert settings.mcp.transport == "sse"

    def test_override_dir_sets_project_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".layoutctl" / "templates").mkdir(parents=True)
        nested = tmp_path / "pages"
        nested.mkdir()
        monkeypatch.chdir(nested)
        settings = LayoutSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()
        assert settings.config_path is None

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[plugins]\nenabled = false\n")
        settings = LayoutSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.plugins.enabled is False
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "layoutctl.toml").write_text("[export\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            LayoutSettings.from_cli(project_root=tmp_path)

    def test_negative_indent_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "layoutctl.toml").write_text("[export]\nindent = -1\n")
        with pytest.raises(Exception):
            LayoutSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = LayoutSettings.from_cli(project_root=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "layoutctl.toml").write_text("[export]\nindent = 8\n")
        monkeypatch.setenv("LAYOUTCTL_EXPORT__INDENT", "0")
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert settings.export.indent == 0

    def test_cli_beats_toml(self, tmp_path: Path) -> None:
        (tmp_path / "layoutctl.toml").write_text("quiet = true\n")
        settings = LayoutSettings.from_cli(project_root=tmp_path, quiet=False)
        assert settings.quiet is False

"""Tests for EditorSession — the mutation entry point."""

from __future__ import annotations

import pytest

from layoutctl.config.settings import LayoutSettings
from layoutctl.domain.modules import MODULE_CATALOG, ModuleType, find_module
from layoutctl.domain.node import LayoutNode
from layoutctl.plugins.manager import PluginManager, hookimpl
from layoutctl.services.session import EditorSession
from tests.conftest import drop


class TestFreshSession:
    def test_root_is_empty_leaf(self, session: EditorSession) -> None:
        root = session.current()
        assert root.is_leaf()
        assert root.content() == ""
        assert root.parent is None


class TestRequestDrop:
    def test_two_by_two_scenario(self, session: EditorSession) -> None:
        root = session.current()
        result = session.request_drop(root, find_module("2x2"))

        assert result.ok
        assert result.op == "request_drop"
        assert result.data["path"] == "root"
        assert result.data["cells"] == 4
        assert result.data["children"] == ["0", "1", "2", "3"]
        assert len(root.children()) == 4
        assert all(c.is_leaf() for c in root.children())

        markup = session.export_markup()
        assert markup.splitlines()[0].endswith("flex-direction: column;\">")
        assert markup.count("<div") == 5

    def test_one_by_two_scenario(self, session: EditorSession) -> None:
        result = session.request_drop(session.current(), find_module("1x2"))
        assert result.ok
        assert len(session.current().children()) == 2
        assert "flex-direction: row;" in session.export_markup()

    @pytest.mark.parametrize("module", MODULE_CATALOG, ids=lambda m: m.key)
    def test_second_drop_on_root_rejected(self, session: EditorSession, module: ModuleType) -> None:
        root = session.current()
        assert session.request_drop(root, find_module("2x2")).ok
        children = root.children()

        result = session.request_drop(root, module)

        assert not result.ok
        assert result.error is not None
        assert result.error.code == "REJECTED_DROP"
        assert result.error.message == "only a leaf cell may accept a new module"
        assert root.children() == children
        assert len(root.children()) == 4

    def test_nested_drop(self, session: EditorSession) -> None:
        root = session.current()
        session.request_drop(root, find_module("1x2"))
        result = session.request_drop(root.children()[1], find_module("3x1"))
        assert result.ok
        assert result.data["path"] == "1"
        assert result.data["children"] == ["1.0", "1.1", "1.2"]

    def test_stale_hover_check_does_not_decide(self, session: EditorSession) -> None:
        """A cell that accepted on hover is re-checked when the drop lands."""
        from layoutctl.domain.policy import can_accept

        root = session.current()
        module = find_module("2x1")
        assert can_accept(root, module)
        assert session.request_drop(root, module).ok
        second = session.request_drop(root, module)
        assert not second.ok
        assert len(root.children()) == 2

    def test_detached_target_rejected(self, session: EditorSession) -> None:
        old_root = session.current()
        session.reset()
        result = session.request_drop(old_root, find_module("2x2"))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "REJECTED_DROP"
        assert old_root.is_leaf()

    def test_foreign_node_rejected(self, session: EditorSession) -> None:
        result = session.request_drop(LayoutNode(), find_module("2x2"))
        assert not result.ok
        assert session.current().is_leaf()

    def test_non_catalog_module_rejected(self, session: EditorSession) -> None:
        custom = ModuleType(key="4x4", label="Custom", rows=4, cols=4)
        result = session.request_drop(session.current(), custom)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_MODULE"
        assert session.current().is_leaf()


class TestDropByPath:
    def test_drop(self, session: EditorSession) -> None:
        data = drop(session, "root", "header-content-footer")
        assert data["module"] == "header-content-footer"
        assert data["label"] == "Header / Content / Footer"

    def test_unknown_path(self, session: EditorSession) -> None:
        result = session.drop("0.1", "2x2")
        assert not result.ok
        assert result.op == "request_drop"
        assert result.error is not None
        assert result.error.code == "NODE_NOT_FOUND"

    @pytest.mark.parametrize("path", ["\u00b2", "0.\u2460", "\u0661"])
    def test_non_ascii_digits(self, session: EditorSession, path: str) -> None:
        result = session.drop(path, "2x2")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NODE_NOT_FOUND"
        assert session.current().is_leaf()

    def test_unknown_module(self, session: EditorSession) -> None:
        result = session.drop("root", "7x7")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_MODULE"


class TestReset:
    def test_reset_after_splits(self, session: EditorSession) -> None:
        drop(session, "root", "2x2")
        drop(session, "0", "1x3")
        drop(session, "0.2", "2x1")

        result = session.reset()

        assert result.ok
        assert result.op == "reset"
        root = session.current()
        assert root.is_leaf()
        assert root.content() == ""
        assert root.children() == ()

    def test_reset_installs_new_root(self, session: EditorSession) -> None:
        old = session.current()
        session.reset()
        assert session.current() is not old

    def test_reset_fresh_session(self, session: EditorSession) -> None:
        assert session.reset().ok
        assert session.current().is_leaf()


class TestContent:
    def test_edit_leaf(self, session: EditorSession) -> None:
        drop(session, "root", "1x2")
        result = session.edit("1", "Sidebar")
        assert result.ok
        assert result.data == {"path": "1", "content": "Sidebar"}
        assert "Sidebar" in session.export_markup()

    def test_edit_container(self, session: EditorSession) -> None:
        drop(session, "root", "1x2")
        result = session.edit("root", "text")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_STATE"

    def test_edit_missing(self, session: EditorSession) -> None:
        result = session.edit("9", "text")
        assert result.error is not None
        assert result.error.code == "NODE_NOT_FOUND"

    def test_set_content_detached(self, session: EditorSession) -> None:
        old = session.current()
        session.reset()
        result = session.set_content(old, "ghost")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NODE_NOT_FOUND"
        assert old.content() == ""


class TestExportMarkup:
    def test_repeatable_and_pure(self, session: EditorSession) -> None:
        drop(session, "root", "2x2")
        drop(session, "3", "1x2")
        before = [n.path() for n in session.current().walk()]

        first = session.export_markup()
        second = session.export_markup()

        assert first == second
        assert [n.path() for n in session.current().walk()] == before

    def test_uses_configured_placeholder(self, tmp_path) -> None:
        (tmp_path / "layoutctl.toml").write_text('[export]\nplaceholder = "TBD"\nindent = 0\n')
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        session = EditorSession(settings)
        drop(session, "root", "1x2")
        markup = session.export_markup()
        assert "\n" not in markup
        assert markup.count(">TBD<") == 2


class TestDescribe:
    def test_snapshot(self, session: EditorSession) -> None:
        drop(session, "root", "1x2")
        drop(session, "0", "2x1")
        result = session.describe()
        assert result.op == "show_layout"
        assert result.data["leaves"] == 3
        assert result.data["containers"] == 2
        assert result.data["accepting"] == ["0.0", "0.1", "1"]
        assert result.data["root"]["module"] == "1x2"


class _Recorder:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, object]]] = []

    @hookimpl
    def post_drop(self, path: str, module_key: str, child_paths: list[str]) -> None:
        self.events.append(("post_drop", {"path": path, "module_key": module_key}))

    @hookimpl
    def post_content(self, path: str, content: str) -> None:
        self.events.append(("post_content", {"path": path, "content": content}))

    @hookimpl
    def post_reset(self) -> None:
        self.events.append(("post_reset", {}))


class _Broken:
    @hookimpl
    def post_drop(self, path: str, module_key: str, child_paths: list[str]) -> None:
        raise RuntimeError("boom")


class TestHooks:
    @pytest.fixture
    def plugins(self) -> PluginManager:
        return PluginManager()

    def test_hooks_fire_after_mutation(self, settings: LayoutSettings, plugins) -> None:
        recorder = _Recorder()
        plugins.register_plugin(recorder)
        session = EditorSession(settings, plugins=plugins)

        drop(session, "root", "1x2")
        session.edit("0", "Hi")
        session.reset()

        assert recorder.events == [
            ("post_drop", {"path": "root", "module_key": "1x2"}),
            ("post_content", {"path": "0", "content": "Hi"}),
            ("post_reset", {}),
        ]

    def test_rejected_drop_fires_nothing(self, settings: LayoutSettings, plugins) -> None:
        recorder = _Recorder()
        plugins.register_plugin(recorder)
        session = EditorSession(settings, plugins=plugins)
        drop(session, "root", "1x2")
        session.drop("root", "1x2")
        assert [name for name, _ in recorder.events] == ["post_drop"]

    def test_plugin_failure_is_warning(self, settings: LayoutSettings, plugins) -> None:
        plugins.register_plugin(_Broken())
        session = EditorSession(settings, plugins=plugins)
        result = session.drop("root", "2x2")
        assert result.ok
        assert result.warnings == ["Plugin hook post_drop failed"]
        assert len(session.current().children()) == 4


class TestFromSettings:
    def test_loads_plugins_when_enabled(self, settings: LayoutSettings) -> None:
        session = EditorSession.from_settings(settings)
        assert session.plugins is not None
        assert session.plugins.is_loaded

    def test_no_plugins_when_disabled(self, tmp_path) -> None:
        (tmp_path / "layoutctl.toml").write_text("[plugins]\nenabled = false\n")
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert EditorSession.from_settings(settings).plugins is None

"""Tests for local directory plugin discovery in PluginManager."""

from __future__ import annotations

from pathlib import Path

import pytest

from solidctl.plugins import hookimpl
from solidctl.plugins.manager import PluginManager

_TIER_PLUGIN_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("solidctl")


def staff_discount(amount):
    return amount * 0.3


class StaffTiers:
    @hookimpl
    def register_discounts(self):
        return {"staff": staff_discount}
"""

_SYNTAX_ERROR_SRC = """\
def broken(
"""

_NO_HOOKS_SRC = """\
class PlainClass:
    def hello(self):
        return "world"
"""

_BAD_INIT_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("solidctl")


class NeedsArgs:
    def __init__(self, required):
        self.required = required

    @hookimpl
    def register_databases(self):
        return {}
"""


@pytest.fixture
def plugin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "plugins"
    path.mkdir()
    return path


class TestLocalDiscovery:
    def test_discovers_and_collects(self, plugin_dir: Path) -> None:
        (plugin_dir / "tiers.py").write_text(_TIER_PLUGIN_SRC, encoding="utf-8")
        pm = PluginManager()
        pm._discover_local(plugin_dir)

        assert "solidctl_local_plugin_tiers.StaffTiers" in pm.list_plugin_names()
        tiers = pm.collect("register_discounts")
        assert tiers["staff"](100) == pytest.approx(30)

    def test_syntax_error_is_skipped(self, plugin_dir: Path) -> None:
        (plugin_dir / "broken.py").write_text(_SYNTAX_ERROR_SRC, encoding="utf-8")
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=plugin_dir)
        assert all("broken" not in n for n in names)
        assert pm.is_loaded

    def test_missing_dir_is_noop(self, tmp_path: Path) -> None:
        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path / "does_not_exist")
        assert pm.is_loaded

    def test_underscore_files_skipped(self, plugin_dir: Path) -> None:
        (plugin_dir / "_helpers.py").write_text(_TIER_PLUGIN_SRC, encoding="utf-8")
        pm = PluginManager()
        pm._discover_local(plugin_dir)
        assert pm.list_plugin_names() == []

    def test_classes_without_hooks_skipped(self, plugin_dir: Path) -> None:
        (plugin_dir / "plain.py").write_text(_NO_HOOKS_SRC, encoding="utf-8")
        pm = PluginManager()
        pm._discover_local(plugin_dir)
        assert pm.list_plugin_names() == []

    def test_uninstantiable_class_skipped(self, plugin_dir: Path) -> None:
        (plugin_dir / "needs_args.py").write_text(_BAD_INIT_SRC, encoding="utf-8")
        pm = PluginManager()
        pm._discover_local(plugin_dir)
        assert pm.list_plugin_names() == []


class TestHasHookImpls:
    def test_positive(self) -> None:
        class WithHook:
            @hookimpl
            def register_discounts(self) -> dict:
                return {}

        assert PluginManager._has_hook_impls(WithHook) is True

    def test_negative(self) -> None:
        class NoHook:
            def register_discounts(self) -> dict:
                return {}

        assert PluginManager._has_hook_impls(NoHook) is False

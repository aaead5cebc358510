"""Tests for PluginManager: discovery, strategy registration, and hook relay."""

from __future__ import annotations

import logging

import pytest

from spatialwriter.plugins import PluginManager, hookimpl
from spatialwriter.writer.packing import BinaryBuffer
from spatialwriter.writer.registry import StrategyRegistry
from spatialwriter.writer.strategies import BinaryStrategy


class _ZeroStrategy(BinaryStrategy):
    name = "zero"

    def _write(self, buffer: BinaryBuffer, geometry: object) -> None:
        buffer.write_byte(0)


class _DummyPlugin:
    """Minimal plugin for registration tests."""

    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    @hookimpl
    def post_convert(
        self, binary_format: str, geometry_type: str, srid: int | None, size: int
    ) -> None:
        self.calls.append(
            {"binary_format": binary_format, "geometry_type": geometry_type, "srid": srid}
        )


class _StrategyPlugin:
    @hookimpl
    def register_binary_strategies(self) -> dict[str, type[BinaryStrategy]]:
        return {"zero": _ZeroStrategy}


class _BuiltinOverridePlugin:
    @hookimpl
    def register_binary_strategies(self) -> dict[str, type[BinaryStrategy]]:
        return {"mysql": _ZeroStrategy}


class _BrokenStrategyPlugin:
    @hookimpl
    def register_binary_strategies(self) -> dict[str, type[BinaryStrategy]]:
        msg = "boom"
        raise RuntimeError(msg)


class _NonDictPlugin:
    @hookimpl
    def register_binary_strategies(self) -> list[str]:
        return ["zero"]


class _FailingConvertPlugin:
    @hookimpl
    def post_convert(
        self, binary_format: str, geometry_type: str, srid: int | None, size: int
    ) -> None:
        msg = "listener down"
        raise RuntimeError(msg)


def _payload() -> dict[str, object]:
    return {"binary_format": "wkb", "geometry_type": "Point", "srid": None, "size": 21}


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, "post_convert")
        assert hasattr(pm.hook, "register_binary_strategies")

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        assert "dummy" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin())
        assert "_DummyPlugin" in pm.list_plugin_names()

    def test_unregister_plugin(self) -> None:
        pm = PluginManager()
        plugin = _DummyPlugin()
        pm.register_plugin(plugin, name="dummy")
        pm.unregister(plugin)
        assert "dummy" not in pm.list_plugin_names()

    def test_is_loaded_false_before_discover(self) -> None:
        assert PluginManager().is_loaded is False

    def test_discover_sets_loaded(self) -> None:
        pm = PluginManager()
        names = pm.discover_and_load()
        assert pm.is_loaded is True
        assert isinstance(names, list)

    def test_uses_given_registry(self) -> None:
        registry = StrategyRegistry()
        assert PluginManager(registry).registry is registry


class TestStrategyRegistration:
    def test_plugin_strategy_registered(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_StrategyPlugin())
        assert pm.registry.get("zero") is _ZeroStrategy

    def test_builtin_override_rejected_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()
        with caplog.at_level(logging.WARNING, logger="spatialwriter.plugins.manager"):
            pm.register_plugin(_BuiltinOverridePlugin())
        assert pm.registry.get("mysql").__name__ == "MySQLBinaryStrategy"
        assert "built-in" in caplog.text

    def test_failing_hook_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        with caplog.at_level(logging.WARNING, logger="spatialwriter.plugins.manager"):
            pm.register_plugin(_BrokenStrategyPlugin(), name="broken")
        assert "broken" in pm.list_plugin_names()
        assert "Failed to collect binary strategies from plugin broken" in caplog.text

    def test_non_dict_result_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        with caplog.at_level(logging.WARNING, logger="spatialwriter.plugins.manager"):
            pm.register_plugin(_NonDictPlugin(), name="listy")
        assert "zero" not in pm.registry
        assert "non-dict" in caplog.text


class TestNotifyConverted:
    def test_calls_every_plugin(self) -> None:
        pm = PluginManager()
        first, second = _DummyPlugin(), _DummyPlugin()
        pm.register_plugin(first, name="first")
        pm.register_plugin(second, name="second")
        assert pm.notify_converted(**_payload()) == []
        assert first.calls == second.calls == [
            {"binary_format": "wkb", "geometry_type": "Point", "srid": None}
        ]

    def test_failure_becomes_warning(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_FailingConvertPlugin())
        assert pm.notify_converted(**_payload()) == ["post_convert hook failed"]

    def test_no_plugins(self) -> None:
        assert PluginManager().notify_converted(**_payload()) == []

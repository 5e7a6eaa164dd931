"""Tests for StorageService: one consumer, swappable databases."""

from __future__ import annotations

from typing import ClassVar

import pytest

from solidctl.config.settings import SolidSettings
from solidctl.domain.types import EchoMixin
from solidctl.plugins import hookimpl
from solidctl.plugins.manager import PluginManager
from solidctl.services.storage import StorageService


class RedisDB(EchoMixin):
    name: ClassVar[str] = "Redis"

    def connect(self) -> None:
        self._echo("Connecting Redis database.")


class NotADatabase:
    def __init__(self, echo: object) -> None:
        self.echo = echo


class NoArgDB:
    name = "NoArg"

    def connect(self) -> None:
        pass


class FlakyDB(EchoMixin):
    name: ClassVar[str] = "Flaky"

    def connect(self) -> None:
        self._echo("Connecting Flaky database.")
        msg = "connection refused"
        raise ConnectionError(msg)


class MisbehavingPlugin:
    @hookimpl
    def register_databases(self) -> dict:
        return {"noarg": NoArgDB, "instance": RedisDB(), "flaky": FlakyDB}


class RedisPlugin:
    @hookimpl
    def register_databases(self) -> dict:
        return {"redis": RedisDB, "SQL": RedisDB}


class BrokenPlugin:
    @hookimpl
    def register_databases(self) -> dict:
        return {"broken": NotADatabase}


class TestSave:
    @pytest.mark.parametrize(
        ("database", "connect_line", "name"),
        [
            ("sql", "Connecting SQL database.", "SQL"),
            ("nosql", "Connecting NoSQL database.", "NoSQL"),
            ("h2", "Connecting H2 in-memory database.", "H2"),
        ],
    )
    def test_builtin_databases(
        self, settings: SolidSettings, database: str, connect_line: str, name: str
    ) -> None:
        result = StorageService(settings).save("Kanishk", database)
        assert result.ok
        assert result.op == "save"
        assert result.data == {
            "database": name,
            "data": "Kanishk",
            "lines": [connect_line, f"Saving user data : [Kanishk] to DB : [{name}]"],
        }

    def test_default_is_sql(self, settings: SolidSettings) -> None:
        assert StorageService(settings).save("x").data["database"] == "SQL"

    def test_unknown_database(self, settings: SolidSettings) -> None:
        result = StorageService(settings).save("x", "oracle")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_DATABASE"
        assert result.error.detail["available"] == ["h2", "nosql", "sql"]


class TestPluginDatabases:
    def test_plugin_database(
        self, settings: SolidSettings, plugin_manager: PluginManager
    ) -> None:
        plugin_manager.register_plugin(RedisPlugin())
        result = StorageService(settings, plugin_manager).save("Rohan", "redis")
        assert result.ok
        assert result.data["lines"] == [
            "Connecting Redis database.",
            "Saving user data : [Rohan] to DB : [Redis]",
        ]

    def test_plugin_cannot_shadow_builtin(
        self, settings: SolidSettings, plugin_manager: PluginManager
    ) -> None:
        plugin_manager.register_plugin(RedisPlugin())
        result = StorageService(settings, plugin_manager).save("Rohan", "sql")
        assert result.data["database"] == "SQL"
        assert result.warnings == [
            "Skipping plugin database 'SQL': conflicts with a built-in"
        ]

    def test_class_without_protocol_is_rejected(
        self, settings: SolidSettings, plugin_manager: PluginManager
    ) -> None:
        plugin_manager.register_plugin(BrokenPlugin())
        result = StorageService(settings, plugin_manager).save("x", "broken")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DATABASE"

    @pytest.mark.parametrize("database", ["noarg", "instance"])
    def test_unbuildable_database_is_rejected(
        self, settings: SolidSettings, plugin_manager: PluginManager, database: str
    ) -> None:
        plugin_manager.register_plugin(MisbehavingPlugin())
        result = StorageService(settings, plugin_manager).save("x", database)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DATABASE"
        assert "cannot be built" in result.error.message

    def test_failing_connect_is_reported(
        self, settings: SolidSettings, plugin_manager: PluginManager
    ) -> None:
        plugin_manager.register_plugin(MisbehavingPlugin())
        result = StorageService(settings, plugin_manager).save("x", "flaky")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DATABASE_FAILED"
        assert result.error.message == "Database 'Flaky' failed: connection refused"
        assert result.error.detail["lines"] == ["Connecting Flaky database."]

"""Dependency Inversion: :class:`UserService` is handed its database.

The service depends on the :class:`Database` protocol only, so any variant
below (or one registered by a plugin) can be swapped in without touching it.
"""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from solidctl.domain.types import Echo, EchoMixin


@runtime_checkable
class Database(Protocol):
    name: str

    def connect(self) -> None: ...


class SqlDB(EchoMixin):
    name: ClassVar[str] = "SQL"

    def connect(self) -> None:
        self._echo("Connecting SQL database.")


class NoSqlDB(EchoMixin):
    name: ClassVar[str] = "NoSQL"

    def connect(self) -> None:
        self._echo("Connecting NoSQL database.")


class H2DB(EchoMixin):
    name: ClassVar[str] = "H2"

    def connect(self) -> None:
        self._echo("Connecting H2 in-memory database.")


BUILTIN_DATABASES: dict[str, type[Database]] = {
    "sql": SqlDB,
    "nosql": NoSqlDB,
    "h2": H2DB,
}


class UserService(EchoMixin):
    """Saves user data through whichever database it was constructed with."""

    def __init__(self, database: Database, echo: Echo = print) -> None:
        super().__init__(echo)
        self._database = database

    @property
    def database(self) -> Database:
        return self._database

    def save_user_data(self, data: str) -> None:
        self._database.connect()
        self._echo(f"Saving user data : [{data}] to DB : [{self._database.name}]")

"""A user service that builds its own concrete database."""

from __future__ import annotations

from solidctl.domain.types import Echo, EchoMixin


class Database(EchoMixin):
    def connect(self) -> None:
        self._echo("Connecting to database...")


class UserService(EchoMixin):
    def __init__(self, echo: Echo = print) -> None:
        super().__init__(echo)
        # Hardwired: no way to hand in another database.
        self._database = Database(echo)

    def save_user_data(self, data: str) -> None:
        self._database.connect()
        self._echo(f"Saving user data: {data}")

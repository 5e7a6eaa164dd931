"""One class that both stores users and authenticates them.

Two reasons to change: storage rules and authentication rules.
"""

from __future__ import annotations

from solidctl.domain.types import Echo, EchoMixin
from solidctl.domain.users import User


class UserManager(EchoMixin):
    def __init__(self, echo: Echo = print) -> None:
        super().__init__(echo)
        self._users: list[User] = []

    def add_user(self, user: User) -> None:
        self._users.append(user)
        self._echo(f"User {user.name} added successfully.")

    def remove_user(self, user_id: int) -> None:
        self._users = [user for user in self._users if user.id != user_id]
        self._echo(f"User with ID {user_id} removed.")

    def authenticate_user(self, user_id: int, name: str) -> bool:
        if any(user.id == user_id and user.name == name for user in self._users):
            self._echo(f"User {name} authenticated successfully.")
            return True
        self._echo(f"Authentication failed for {name}.")
        return False

"""Single Responsibility: user storage and authentication as separate classes.

:class:`UserManager` owns the user list and changes only when storage rules
change. :class:`AuthenticationManager` holds no users of its own; it decides
against whatever snapshot the caller passes in.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from solidctl.domain.types import Echo, EchoMixin


@dataclass(frozen=True)
class User:
    """Plain user record."""

    id: int
    name: str


class UserManager(EchoMixin):
    """Add, remove, and list users in insertion order."""

    def __init__(self, echo: Echo = print) -> None:
        super().__init__(echo)
        self._users: list[User] = []

    def add_user(self, user: User) -> None:
        self._users.append(user)
        self._echo(f"User {user.name} added successfully.")

    def remove_user(self, user_id: int) -> None:
        self._users = [user for user in self._users if user.id != user_id]
        self._echo(f"User with ID {user_id} removed.")

    def get_users(self) -> list[User]:
        """Return a snapshot of the current users."""
        return list(self._users)


class AuthenticationManager(EchoMixin):
    """Read-only authentication against a caller-supplied user snapshot."""

    def authenticate_user(self, user_id: int, name: str, users: Iterable[User]) -> bool:
        if any(user.id == user_id and user.name == name for user in users):
            self._echo(f"User {name} authenticated successfully.")
            return True
        self._echo(f"Authentication failed for {name}.")
        return False

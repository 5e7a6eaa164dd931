"""Tests for the single-responsibility user storage/authentication split."""

from __future__ import annotations

from solidctl.domain.users import AuthenticationManager, User, UserManager
from tests.conftest import Transcript


class TestUserManager:
    def test_add_keeps_insertion_order(self, transcript: Transcript) -> None:
        manager = UserManager(transcript.echo)
        manager.add_user(User(2, "Rohan"))
        manager.add_user(User(1, "Kanishk"))
        assert [u.id for u in manager.get_users()] == [2, 1]
        assert transcript == [
            "User Rohan added successfully.",
            "User Kanishk added successfully.",
        ]

    def test_remove_by_id(self, transcript: Transcript) -> None:
        manager = UserManager(transcript.echo)
        manager.add_user(User(1, "A"))
        manager.add_user(User(2, "B"))
        manager.remove_user(1)
        assert manager.get_users() == [User(2, "B")]
        assert transcript.lines[-1] == "User with ID 1 removed."

    def test_remove_unknown_id_is_noop(self, transcript: Transcript) -> None:
        manager = UserManager(transcript.echo)
        manager.add_user(User(1, "A"))
        manager.remove_user(99)
        assert manager.get_users() == [User(1, "A")]

    def test_get_users_returns_snapshot(self) -> None:
        manager = UserManager(lambda _line: None)
        manager.add_user(User(1, "A"))
        snapshot = manager.get_users()
        snapshot.clear()
        assert manager.get_users() == [User(1, "A")]

    def test_user_is_frozen(self) -> None:
        user = User(1, "A")
        try:
            user.name = "B"  # type: ignore[misc]
            raise AssertionError("Should have raised")
        except AttributeError:
            pass


class TestAuthenticationManager:
    def test_authenticate_then_remove(self, transcript: Transcript) -> None:
        manager = UserManager(transcript.echo)
        auth = AuthenticationManager(transcript.echo)

        manager.add_user(User(1, "A"))
        assert auth.authenticate_user(1, "A", manager.get_users()) is True

        manager.remove_user(1)
        assert auth.authenticate_user(1, "A", manager.get_users()) is False
        assert transcript.lines[-1] == "Authentication failed for A."

    def test_id_and_name_must_both_match(self) -> None:
        auth = AuthenticationManager(lambda _line: None)
        users = [User(1, "Kanishk"), User(3, "Karan")]
        assert auth.authenticate_user(3, "Rohan", users) is False
        assert auth.authenticate_user(3, "Karan", users) is True

    def test_does_not_mutate_snapshot(self) -> None:
        auth = AuthenticationManager(lambda _line: None)
        users = [User(1, "A")]
        auth.authenticate_user(1, "A", users)
        auth.authenticate_user(2, "B", users)
        assert users == [User(1, "A")]

    def test_holds_no_users(self) -> None:
        assert not hasattr(AuthenticationManager(), "_users")

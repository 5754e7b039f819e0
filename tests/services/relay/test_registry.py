# tests/services/relay/test_registry.py
"""
Tests for the presence directory.
"""

from __future__ import annotations

from eshop.services.relay.registry import PresenceEntry, SessionRegistry


class TestSessionRegistry:
    """Tests for SessionRegistry."""

    def test_add_and_lookup(self) -> None:
        registry = SessionRegistry()

        entry = registry.add_user("user-1", "conn-1")

        assert entry == PresenceEntry("user-1", "conn-1")
        assert registry.get_user("user-1") == entry
        assert registry.get_by_connection("conn-1") == entry
        assert len(registry) == 1

    def test_second_announcement_keeps_first_connection(self) -> None:
        registry = SessionRegistry()
        registry.add_user("user-1", "conn-1")

        entry = registry.add_user("user-1", "conn-2")

        assert entry.connection_id == "conn-1"
        assert len(registry) == 1

    def test_remove_by_connection(self) -> None:
        registry = SessionRegistry()
        registry.add_user("user-1", "conn-1")
        registry.add_user("user-2", "conn-2")

        removed = registry.remove_user("conn-1")

        assert [e.user_id for e in removed] == ["user-1"]
        assert registry.get_user("user-1") is None
        assert [e.user_id for e in registry.users()] == ["user-2"]

    def test_remove_is_idempotent(self) -> None:
        registry = SessionRegistry()
        registry.add_user("user-1", "conn-1")

        registry.remove_user("conn-1")

        assert registry.remove_user("conn-1") == []
        assert len(registry) == 0

    def test_users_in_announcement_order(self) -> None:
        registry = SessionRegistry()
        for i in range(3):
            registry.add_user(f"user-{i}", f"conn-{i}")

        assert [e.to_dict() for e in registry.users()] == [
            {"userId": "user-0", "socketId": "conn-0"},
            {"userId": "user-1", "socketId": "conn-1"},
            {"userId": "user-2", "socketId": "conn-2"},
        ]

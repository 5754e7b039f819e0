# eshop/services/relay/registry.py
"""
Presence directory: which user is online under which connection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PresenceEntry:
    """One online user."""
    user_id: str
    connection_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"userId": self.user_id, "socketId": self.connection_id}


class SessionRegistry:
    """
    Online users keyed by user id, at most one entry per user.

    A user that announces itself again keeps its first connection id until
    that connection goes away.
    """

    def __init__(self) -> None:
        # user_id -> PresenceEntry, in announcement order
        self._entries: dict[str, PresenceEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def add_user(self, user_id: str, connection_id: str) -> PresenceEntry:
        """Registers the user unless already present; returns the stored entry."""
        existing = self._entries.get(user_id)
        if existing is not None:
            return existing

        entry = PresenceEntry(user_id=user_id, connection_id=connection_id)
        self._entries[user_id] = entry
        return entry

    def remove_user(self, connection_id: str) -> list[PresenceEntry]:
        """Drops every entry bound to the connection. Safe to repeat."""
        removed = [e for e in self._entries.values() if e.connection_id == connection_id]
        for entry in removed:
            del self._entries[entry.user_id]
        return removed

    def get_user(self, user_id: str) -> PresenceEntry | None:
        return self._entries.get(user_id)

    def get_by_connection(self, connection_id: str) -> PresenceEntry | None:
        return next((e for e in self._entries.values() if e.connection_id == connection_id), None)

    def users(self) -> list[PresenceEntry]:
        """Snapshot of the directory."""
        return list(self._entries.values())

# eshop/services/relay/connection_manager.py
"""
WebSocket connection manager.
Owns the open sockets and delivers frames to one or all of them.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from fastapi import WebSocket

from eshop.common.logger import log_debug


@dataclass
class ConnectionInfo:
    """An accepted socket."""
    websocket: WebSocket
    connection_id: str
    connected_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class ConnectionManager:
    """
    Keeps accepted sockets under opaque connection ids (uuid hex).
    A socket that fails on send is dropped.
    """

    def __init__(self) -> None:
        # connection_id -> ConnectionInfo
        self._connections: dict[str, ConnectionInfo] = {}

        self._total_connections: int = 0
        self._total_messages_sent: int = 0

    @property
    def active_connections(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> str:
        """Accepts the socket and returns its connection id."""
        await websocket.accept()

        connection_id = uuid.uuid4().hex
        self._connections[connection_id] = ConnectionInfo(websocket=websocket, connection_id=connection_id)
        self._total_connections += 1
        return connection_id

    async def disconnect(self, connection_id: str) -> None:
        self._connections.pop(connection_id, None)

    async def send_personal(self, connection_id: str, message: dict[str, Any]) -> bool:
        """
        Sends a frame to one connection.

        Returns:
            True if sent, False if the connection is unknown or broken
        """
        conn = self._connections.get(connection_id)
        if conn is None:
            return False

        try:
            await conn.websocket.send_json(message)
            self._total_messages_sent += 1
            return True
        except Exception as e:
            await log_debug(f"Dropping connection {connection_id}: {e}")
            await self.disconnect(connection_id)
            return False

    async def broadcast_all(self, message: dict[str, Any]) -> int:
        """Sends a frame to every connection; returns how many succeeded."""
        sent_count = 0
        failed: list[str] = []

        for connection_id, conn in list(self._connections.items()):
            try:
                await conn.websocket.send_json(message)
                sent_count += 1
                self._total_messages_sent += 1
            except Exception:
                failed.append(connection_id)

        for connection_id in failed:
            await self.disconnect(connection_id)

        return sent_count

    def get_stats(self) -> dict[str, Any]:
        return {
            "active_connections": len(self._connections),
            "total_connections_ever": self._total_connections,
            "total_messages_sent": self._total_messages_sent,
        }

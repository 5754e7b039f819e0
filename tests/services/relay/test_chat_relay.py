# tests/services/relay/test_chat_relay.py
"""
Tests for ChatRelay and the connection manager it writes to.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock

import pytest

from eshop.services.relay.connection_manager import ConnectionManager
from eshop.services.relay.registry import SessionRegistry
from eshop.services.relay.relay import ChatRelay


def _sent(websocket: AsyncMock) -> list[dict[str, Any]]:
    """Frames sent to a mocked socket."""
    return [c.args[0] for c in websocket.send_json.await_args_list]


def _events(websocket: AsyncMock, event: str) -> list[Any]:
    return [frame["data"] for frame in _sent(websocket) if frame["event"] == event]


@pytest.fixture
def manager() -> ConnectionManager:
    return ConnectionManager()


@pytest.fixture
def relay(manager: ConnectionManager) -> ChatRelay:
    return ChatRelay(SessionRegistry(), manager)


async def _connect(manager: ConnectionManager) -> tuple[str, AsyncMock]:
    websocket = AsyncMock()
    connection_id = await manager.connect(websocket)
    return connection_id, websocket


class TestConnectionManager:
    """Tests for ConnectionManager."""

    @pytest.mark.asyncio
    async def test_connect_accepts(self, manager: ConnectionManager) -> None:
        connection_id, websocket = await _connect(manager)

        websocket.accept.assert_awaited_once()
        assert len(connection_id) == 32
        assert manager.active_connections == 1

    @pytest.mark.asyncio
    async def test_send_to_unknown_connection(self, manager: ConnectionManager) -> None:
        assert await manager.send_personal("nope", {"event": "x"}) is False

    @pytest.mark.asyncio
    async def test_broken_socket_is_dropped(self, manager: ConnectionManager) -> None:
        connection_id, websocket = await _connect(manager)
        websocket.send_json.side_effect = RuntimeError("closed")

        assert await manager.send_personal(connection_id, {"event": "x"}) is False
        assert manager.active_connections == 0

    @pytest.mark.asyncio
    async def test_broadcast_counts_successes(self, manager: ConnectionManager) -> None:
        await _connect(manager)
        _, broken = await _connect(manager)
        broken.send_json.side_effect = RuntimeError("closed")

        sent = await manager.broadcast_all({"event": "x"})

        assert sent == 1
        assert manager.get_stats() == {
            "active_connections": 1,
            "total_connections_ever": 2,
            "total_messages_sent": 1,
        }


class TestPresence:
    """Tests for addUser / disconnect."""

    @pytest.mark.asyncio
    async def test_add_user_broadcasts_directory(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        conn_a, ws_a = await _connect(manager)
        conn_b, ws_b = await _connect(manager)

        await relay.add_user("user-a", conn_a)

        expected = [{"userId": "user-a", "socketId": conn_a}]
        assert _events(ws_a, "getUsers") == [expected]
        assert _events(ws_b, "getUsers") == [expected]

    @pytest.mark.asyncio
    async def test_disconnect_broadcasts_directory(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        conn_a, ws_a = await _connect(manager)
        conn_b, ws_b = await _connect(manager)
        await relay.add_user("user-a", conn_a)
        await relay.add_user("user-b", conn_b)

        await manager.disconnect(conn_a)
        await relay.remove_connection(conn_a)

        assert _events(ws_b, "getUsers")[-1] == [{"userId": "user-b", "socketId": conn_b}]
        assert relay.registry.get_user("user-a") is None


class TestMessaging:
    """Tests for sendMessage / messageSeen / updateLastMessage."""

    @pytest.mark.asyncio
    async def test_online_receiver_gets_message(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        conn_a, ws_a = await _connect(manager)
        conn_b, ws_b = await _connect(manager)
        await relay.add_user("user-a", conn_a)
        await relay.add_user("user-b", conn_b)

        message = await relay.send_message("user-a", "user-b", "hi", [])

        delivered = _events(ws_b, "getMessage")
        assert delivered == [message.to_dict()]
        assert delivered[0]["senderId"] == "user-a"
        assert delivered[0]["seen"] is False
        assert _events(ws_a, "getMessage") == []

    @pytest.mark.asyncio
    async def test_offline_receiver_is_buffered(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        conn_a, ws_a = await _connect(manager)
        await relay.add_user("user-a", conn_a)

        message = await relay.send_message("user-a", "user-b", "hi")

        assert relay.history("user-b") == [message]
        assert _events(ws_a, "getMessage") == []

    @pytest.mark.asyncio
    async def test_seen_notifies_sender(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        conn_a, ws_a = await _connect(manager)
        conn_b, _ = await _connect(manager)
        await relay.add_user("user-a", conn_a)
        await relay.add_user("user-b", conn_b)
        message = await relay.send_message("user-a", "user-b", "hi")

        assert await relay.mark_seen("user-a", "user-b", message.id) is True

        assert relay.history("user-b")[0].seen is True
        assert _events(ws_a, "messageSeen") == [
            {"senderId": "user-a", "receiverId": "user-b", "messageId": message.id}
        ]

    @pytest.mark.asyncio
    async def test_seen_unknown_message(self, relay: ChatRelay) -> None:
        assert await relay.mark_seen("user-a", "user-b", "nope") is False

    @pytest.mark.asyncio
    async def test_seen_requires_matching_sender(self, relay: ChatRelay) -> None:
        message = await relay.send_message("user-a", "user-b", "hi")

        assert await relay.mark_seen("user-c", "user-b", message.id) is False
        assert message.seen is False

    @pytest.mark.asyncio
    async def test_last_message_broadcast(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        _, ws_a = await _connect(manager)
        _, ws_b = await _connect(manager)

        sent = await relay.broadcast_last_message("hi", "msg-1")

        assert sent == 2
        for websocket in (ws_a, ws_b):
            assert _events(websocket, "getLastMessage") == [{"lastMessage": "hi", "lastMessagesId": "msg-1"}]


class TestHandleFrame:
    """Tests for frame parsing and dispatch."""

    @pytest.mark.asyncio
    async def test_add_user_frame(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        conn, _ = await _connect(manager)

        await relay.handle_frame(conn, json.dumps({"event": "addUser", "data": "user-a"}))

        assert relay.registry.get_user("user-a").connection_id == conn

    @pytest.mark.asyncio
    async def test_add_user_object_payload(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        conn, _ = await _connect(manager)

        await relay.handle_frame(conn, json.dumps({"event": "addUser", "data": {"userId": "user-a"}}))

        assert relay.registry.get_user("user-a") is not None

    @pytest.mark.asyncio
    async def test_send_message_frame(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        conn_b, ws_b = await _connect(manager)
        await relay.add_user("user-b", conn_b)

        await relay.handle_frame("conn-a", json.dumps({
            "event": "sendMessage",
            "data": {"senderId": "user-a", "receiverId": "user-b", "text": "hi", "images": "img.png"},
        }))

        delivered = _events(ws_b, "getMessage")
        assert delivered[0]["text"] == "hi"
        assert delivered[0]["images"] == ["img.png"]

    @pytest.mark.asyncio
    async def test_update_last_message_accepts_both_keys(
        self, relay: ChatRelay, manager: ConnectionManager
    ) -> None:
        _, ws = await _connect(manager)

        await relay.handle_frame("c", json.dumps({
            "event": "updateLastMessage", "data": {"lastMessage": "a", "lastMessageId": "m1"},
        }))
        await relay.handle_frame("c", json.dumps({
            "event": "updateLastMessage", "data": {"lastMessage": "b", "lastMessagesId": "m2"},
        }))

        assert _events(ws, "getLastMessage") == [
            {"lastMessage": "a", "lastMessagesId": "m1"},
            {"lastMessage": "b", "lastMessagesId": "m2"},
        ]

    @pytest.mark.asyncio
    async def test_get_messages_defaults_to_own_user(self, relay: ChatRelay, manager: ConnectionManager) -> None:
        conn, ws = await _connect(manager)
        await relay.add_user("user-b", conn)
        message = await relay.send_message("user-a", "user-b", "hi")

        await relay.handle_frame(conn, json.dumps({"event": "getMessages"}))

        assert _events(ws, "messages") == [[message.to_dict()]]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            json.dumps([1, 2]),
            json.dumps({"data": "x"}),
            json.dumps({"event": "unknown", "data": {}}),
            json.dumps({"event": "sendMessage", "data": "x"}),
            json.dumps({"event": "messageSeen", "data": {"senderId": "a"}}),
            json.dumps({"event": "addUser", "data": None}),
        ],
    )
    async def test_bad_frames_are_ignored(self, relay: ChatRelay, manager: ConnectionManager, raw: str) -> None:
        conn, ws = await _connect(manager)

        await relay.handle_frame(conn, raw)

        assert len(relay.registry) == 0
        ws.send_json.assert_not_awaited()

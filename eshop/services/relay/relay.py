# eshop/services/relay/relay.py
"""
Chat relay.

Keeps the presence directory and an in-memory buffer of chat messages, and
forwards chat events between connected clients. Nothing here is persisted.

Frames are JSON objects {"event": <name>, "data": <payload>}.

Incoming events:
- addUser            data: user id
- sendMessage        data: {senderId, receiverId, text, images}
- messageSeen        data: {senderId, receiverId, messageId}
- updateLastMessage  data: {lastMessage, lastMessagesId}
- getMessages        data: user id (defaults to the user on this connection)

Outgoing events: getUsers, getMessage, messageSeen, getLastMessage, messages.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from typing import Any

from eshop.common.logger import log_debug, log_info
from eshop.services.relay.connection_manager import ConnectionManager
from eshop.services.relay.registry import SessionRegistry


@dataclass
class RelayMessage:
    """Chat message held in memory."""
    sender_id: str
    receiver_id: str
    text: str | None = None
    images: list[Any] = field(default_factory=list)
    seen: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "senderId": self.sender_id,
            "receiverId": self.receiver_id,
            "text": self.text,
            "images": self.images,
            "seen": self.seen,
        }


def make_frame(event: str, data: Any) -> dict[str, Any]:
    return {"event": event, "data": data}


def _user_id_from(data: Any) -> str | None:
    """Accepts a bare id or {"userId": ...}."""
    if isinstance(data, dict):
        data = data.get("userId")
    if data is None or isinstance(data, (dict, list)):
        return None
    return str(data)


class ChatRelay:
    """
    Presence directory plus chat forwarding.

    Messages are buffered per receiver whether or not the receiver is online,
    and pushed immediately when it is.
    """

    def __init__(self, registry: SessionRegistry, connections: ConnectionManager) -> None:
        self.registry = registry
        self.connections = connections
        # receiver_id -> messages addressed to it
        self._messages: dict[str, list[RelayMessage]] = {}

    # === PRESENCE ===

    async def add_user(self, user_id: str, connection_id: str) -> None:
        self.registry.add_user(user_id, connection_id)
        await log_info(f"Relay user online: {user_id} ({connection_id})")
        await self.broadcast_users()

    async def remove_connection(self, connection_id: str) -> None:
        removed = self.registry.remove_user(connection_id)
        if removed:
            await log_info(f"Relay user offline: {', '.join(e.user_id for e in removed)}")
        await self.broadcast_users()

    async def broadcast_users(self) -> int:
        users = [entry.to_dict() for entry in self.registry.users()]
        return await self.connections.broadcast_all(make_frame("getUsers", users))

    # === CHAT ===

    async def send_message(
        self,
        sender_id: str,
        receiver_id: str,
        text: str | None = None,
        images: list[Any] | None = None,
    ) -> RelayMessage:
        """
        Buffers a message for the receiver and delivers it right away when the
        receiver is online. An offline receiver is not an error.
        """
        message = RelayMessage(
            sender_id=sender_id,
            receiver_id=receiver_id,
            text=text,
            images=list(images or []),
        )
        self._messages.setdefault(receiver_id, []).append(message)

        receiver = self.registry.get_user(receiver_id)
        if receiver is not None:
            await self.connections.send_personal(
                receiver.connection_id, make_frame("getMessage", message.to_dict())
            )
        return message

    async def mark_seen(self, sender_id: str, receiver_id: str, message_id: str) -> bool:
        """
        Flags a buffered message as seen and tells the original sender.

        Returns:
            False when no such message is buffered
        """
        message = next(
            (
                m for m in self._messages.get(receiver_id, [])
                if m.id == message_id and m.sender_id == sender_id
            ),
            None,
        )
        if message is None:
            return False

        message.seen = True
        sender = self.registry.get_user(sender_id)
        if sender is not None:
            await self.connections.send_personal(
                sender.connection_id,
                make_frame(
                    "messageSeen",
                    {"senderId": sender_id, "receiverId": receiver_id, "messageId": message_id},
                ),
            )
        return True

    async def broadcast_last_message(self, last_message: str | None, last_message_id: str | None) -> int:
        return await self.connections.broadcast_all(
            make_frame("getLastMessage", {"lastMessage": last_message, "lastMessagesId": last_message_id})
        )

    def history(self, user_id: str) -> list[RelayMessage]:
        """Buffered messages addressed to the user, oldest first."""
        return list(self._messages.get(user_id, []))

    def get_stats(self) -> dict[str, Any]:
        return {
            "online_users": len(self.registry),
            "buffered_messages": sum(len(m) for m in self._messages.values()),
        }

    # === DISPATCH ===

    async def handle_frame(self, connection_id: str, raw: str) -> None:
        """Parses one text frame and dispatches it. Bad frames are ignored."""
        try:
            frame = json.loads(raw)
        except (TypeError, ValueError):
            await log_debug(f"Ignoring malformed frame from {connection_id}")
            return

        if not isinstance(frame, dict) or not isinstance(frame.get("event"), str):
            await log_debug(f"Ignoring frame without event from {connection_id}")
            return

        await self.handle_event(connection_id, frame["event"], frame.get("data"))

    async def handle_event(self, connection_id: str, event: str, data: Any) -> None:
        match event:
            case "addUser":
                user_id = _user_id_from(data)
                if user_id:
                    await self.add_user(user_id, connection_id)

            case "sendMessage":
                if not isinstance(data, dict) or not data.get("senderId") or not data.get("receiverId"):
                    return
                images = data.get("images")
                if images is not None and not isinstance(images, list):
                    images = [images]
                await self.send_message(
                    str(data["senderId"]),
                    str(data["receiverId"]),
                    data.get("text"),
                    images,
                )

            case "messageSeen":
                if not isinstance(data, dict):
                    return
                sender_id, receiver_id, message_id = (
                    data.get("senderId"), data.get("receiverId"), data.get("messageId")
                )
                if sender_id and receiver_id and message_id:
                    await self.mark_seen(str(sender_id), str(receiver_id), str(message_id))

            case "updateLastMessage":
                if not isinstance(data, dict):
                    return
                await self.broadcast_last_message(
                    data.get("lastMessage"),
                    data.get("lastMessagesId", data.get("lastMessageId")),
                )

            case "getMessages":
                user_id = _user_id_from(data)
                if user_id is None:
                    entry = self.registry.get_by_connection(connection_id)
                    user_id = entry.user_id if entry else None
                if user_id is None:
                    return
                await self.connections.send_personal(
                    connection_id,
                    make_frame("messages", [m.to_dict() for m in self.history(user_id)]),
                )

            case _:
                await log_debug(f"Ignoring unknown event {event!r} from {connection_id}")

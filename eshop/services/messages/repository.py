from typing import Any, Optional

from eshop.infra.database import DatabaseManager

MESSAGE_COLUMNS = "id, conversation_id, text, sender, images, created_at, updated_at"


class MessageRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create_message(
        self,
        conversation_id: Optional[str],
        text: Optional[str],
        sender: Optional[str],
        images: Optional[Any],
    ) -> dict:
        query = f"""
            INSERT INTO messages (conversation_id, text, sender, images)
            VALUES ($1, $2, $3, $4)
            RETURNING {MESSAGE_COLUMNS}
        """
        row = await self.db.fetchrow(query, conversation_id, text, sender, images)
        return dict(row)

    async def get_messages_by_conversation(self, conversation_id: str) -> list[dict]:
        rows = await self.db.fetch(
            f"SELECT {MESSAGE_COLUMNS} FROM messages WHERE conversation_id = $1 ORDER BY created_at",
            conversation_id,
        )
        return [dict(row) for row in rows]

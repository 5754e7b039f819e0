from typing import Optional

from eshop.infra.database import DatabaseManager

CONVERSATION_COLUMNS = "id, group_title, members, last_message, last_message_id, created_at, updated_at"


class ConversationRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create_conversation(self, group_title: str, members: list[str]) -> dict:
        query = f"""
            INSERT INTO conversations (group_title, members)
            VALUES ($1, $2)
            RETURNING {CONVERSATION_COLUMNS}
        """
        row = await self.db.fetchrow(query, group_title, members)
        return dict(row)

    async def get_conversation_by_title(self, group_title: str) -> Optional[dict]:
        row = await self.db.fetchrow(
            f"SELECT {CONVERSATION_COLUMNS} FROM conversations WHERE group_title = $1 LIMIT 1",
            group_title,
        )
        return dict(row) if row else None

    async def get_conversations_by_member(self, member_id: str) -> list[dict]:
        rows = await self.db.fetch(
            f"""
            SELECT {CONVERSATION_COLUMNS} FROM conversations
            WHERE $1 = ANY(members)
            ORDER BY updated_at DESC, created_at DESC
            """,
            member_id,
        )
        return [dict(row) for row in rows]

    async def update_last_message(
        self,
        conversation_id: str,
        last_message: Optional[str],
        last_message_id: Optional[str],
    ) -> Optional[dict]:
        query = f"""
            UPDATE conversations
            SET last_message = $2, last_message_id = $3, updated_at = NOW()
            WHERE id = $1
            RETURNING {CONVERSATION_COLUMNS}
        """
        row = await self.db.fetchrow(query, conversation_id, last_message, last_message_id)
        return dict(row) if row else None

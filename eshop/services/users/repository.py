from typing import Any, Optional

from eshop.infra.database import DatabaseManager

USER_COLUMNS = "id, name, email, phone_number, addresses, role, avatar, created_at"


class UserRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create_user(self, name: str, email: str, password_hash: str, avatar: Optional[dict]) -> dict:
        query = f"""
            INSERT INTO users (name, email, password, avatar)
            VALUES ($1, $2, $3, $4)
            RETURNING {USER_COLUMNS}
        """
        row = await self.db.fetchrow(query, name, email, password_hash, avatar)
        return dict(row)

    async def get_user_by_id(self, user_id: str) -> Optional[dict]:
        row = await self.db.fetchrow(f"SELECT {USER_COLUMNS} FROM users WHERE id = $1", user_id)
        return dict(row) if row else None

    async def get_user_by_email(self, email: str) -> Optional[dict]:
        row = await self.db.fetchrow(f"SELECT {USER_COLUMNS} FROM users WHERE email = $1", email)
        return dict(row) if row else None

    async def get_password_hash(self, user_id: str) -> Optional[str]:
        return await self.db.fetchval("SELECT password FROM users WHERE id = $1", user_id)

    async def get_credentials_by_email(self, email: str) -> Optional[dict]:
        """Returns the profile plus the password hash, for login."""
        row = await self.db.fetchrow(
            f"SELECT {USER_COLUMNS}, password FROM users WHERE email = $1", email
        )
        return dict(row) if row else None

    async def update_info(self, user_id: str, name: str, email: str, phone_number: Optional[str]) -> Optional[dict]:
        query = f"""
            UPDATE users SET name = $2, email = $3, phone_number = $4
            WHERE id = $1
            RETURNING {USER_COLUMNS}
        """
        row = await self.db.fetchrow(query, user_id, name, email, phone_number)
        return dict(row) if row else None

    async def update_avatar(self, user_id: str, avatar: dict) -> Optional[dict]:
        row = await self.db.fetchrow(
            f"UPDATE users SET avatar = $2 WHERE id = $1 RETURNING {USER_COLUMNS}",
            user_id, avatar,
        )
        return dict(row) if row else None

    async def update_addresses(self, user_id: str, addresses: list[dict[str, Any]]) -> Optional[dict]:
        row = await self.db.fetchrow(
            f"UPDATE users SET addresses = $2 WHERE id = $1 RETURNING {USER_COLUMNS}",
            user_id, addresses,
        )
        return dict(row) if row else None

    async def update_password(self, user_id: str, password_hash: str) -> None:
        await self.db.execute("UPDATE users SET password = $2 WHERE id = $1", user_id, password_hash)

    async def get_all_users(self) -> list[dict]:
        rows = await self.db.fetch(f"SELECT {USER_COLUMNS} FROM users ORDER BY created_at DESC")
        return [dict(row) for row in rows]

    async def delete_user(self, user_id: str) -> bool:
        status = await self.db.execute("DELETE FROM users WHERE id = $1", user_id)
        return status != "DELETE 0"

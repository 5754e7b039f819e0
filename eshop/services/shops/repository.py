from typing import Any, Optional

from eshop.infra.database import DatabaseManager

SHOP_COLUMNS = (
    "id, name, email, description, address, phone_number, role, avatar, zip_code, "
    "withdraw_method, available_balance, transections, created_at"
)


class ShopRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create_shop(self, shop_data: dict[str, Any]) -> dict:
        query = f"""
            INSERT INTO shops (name, email, password, avatar, address, phone_number, zip_code, description)
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
            RETURNING {SHOP_COLUMNS}
        """
        row = await self.db.fetchrow(
            query,
            shop_data["name"],
            shop_data["email"],
            shop_data["password"],
            shop_data.get("avatar"),
            shop_data["address"],
            shop_data["phone_number"],
            shop_data["zip_code"],
            shop_data.get("description"),
        )
        return dict(row)

    async def get_shop_by_id(self, shop_id: str) -> Optional[dict]:
        row = await self.db.fetchrow(f"SELECT {SHOP_COLUMNS} FROM shops WHERE id = $1", shop_id)
        return dict(row) if row else None

    async def get_shop_by_email(self, email: str) -> Optional[dict]:
        row = await self.db.fetchrow(f"SELECT {SHOP_COLUMNS} FROM shops WHERE email = $1", email)
        return dict(row) if row else None

    async def get_credentials_by_email(self, email: str) -> Optional[dict]:
        """Returns the profile plus the password hash, for login."""
        row = await self.db.fetchrow(
            f"SELECT {SHOP_COLUMNS}, password FROM shops WHERE email = $1", email
        )
        return dict(row) if row else None

    async def update_avatar(self, shop_id: str, avatar: dict) -> Optional[dict]:
        row = await self.db.fetchrow(
            f"UPDATE shops SET avatar = $2 WHERE id = $1 RETURNING {SHOP_COLUMNS}",
            shop_id, avatar,
        )
        return dict(row) if row else None

    async def update_info(
        self,
        shop_id: str,
        name: str,
        description: Optional[str],
        address: str,
        phone_number: str,
        zip_code: str,
    ) -> Optional[dict]:
        query = f"""
            UPDATE shops
            SET name = $2, description = $3, address = $4, phone_number = $5, zip_code = $6
            WHERE id = $1
            RETURNING {SHOP_COLUMNS}
        """
        row = await self.db.fetchrow(query, shop_id, name, description, address, phone_number, zip_code)
        return dict(row) if row else None

    async def update_withdraw_method(self, shop_id: str, withdraw_method: Optional[dict]) -> Optional[dict]:
        row = await self.db.fetchrow(
            f"UPDATE shops SET withdraw_method = $2 WHERE id = $1 RETURNING {SHOP_COLUMNS}",
            shop_id, withdraw_method,
        )
        return dict(row) if row else None

    async def set_available_balance(self, shop_id: str, amount: float) -> None:
        """Overwrites the balance. No-op for an unknown shop."""
        await self.db.execute(
            "UPDATE shops SET available_balance = $2 WHERE id = $1", shop_id, amount
        )

    async def decrement_available_balance(self, shop_id: str, amount: float) -> None:
        await self.db.execute(
            "UPDATE shops SET available_balance = available_balance - $2 WHERE id = $1",
            shop_id, amount,
        )

    async def get_all_shops(self) -> list[dict]:
        rows = await self.db.fetch(f"SELECT {SHOP_COLUMNS} FROM shops ORDER BY created_at DESC")
        return [dict(row) for row in rows]

    async def delete_shop(self, shop_id: str) -> bool:
        status = await self.db.execute("DELETE FROM shops WHERE id = $1", shop_id)
        return status != "DELETE 0"

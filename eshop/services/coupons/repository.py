from typing import Any, Optional

from eshop.infra.database import DatabaseManager

COUPON_COLUMNS = "id, name, value, min_amount, max_amount, shop_id, selected_product, created_at"


class CouponRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create_coupon(self, coupon_data: dict[str, Any]) -> dict:
        query = f"""
            INSERT INTO coupon_codes (name, value, min_amount, max_amount, shop_id, selected_product)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {COUPON_COLUMNS}
        """
        row = await self.db.fetchrow(
            query,
            coupon_data["name"],
            coupon_data["value"],
            coupon_data.get("min_amount"),
            coupon_data.get("max_amount"),
            coupon_data["shop_id"],
            coupon_data.get("selected_product"),
        )
        return dict(row)

    async def get_coupon_by_name(self, name: str) -> Optional[dict]:
        row = await self.db.fetchrow(f"SELECT {COUPON_COLUMNS} FROM coupon_codes WHERE name = $1", name)
        return dict(row) if row else None

    async def get_coupons_by_shop(self, shop_id: str) -> list[dict]:
        rows = await self.db.fetch(
            f"SELECT {COUPON_COLUMNS} FROM coupon_codes WHERE shop_id = $1 ORDER BY created_at", shop_id
        )
        return [dict(row) for row in rows]

    async def delete_coupon(self, coupon_id: str) -> bool:
        status = await self.db.execute("DELETE FROM coupon_codes WHERE id = $1", coupon_id)
        return status != "DELETE 0"

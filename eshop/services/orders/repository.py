from datetime import datetime
from typing import Any, Optional

from eshop.infra.database import DatabaseManager

ORDER_COLUMNS = (
    "id, cart, shipping_address, buyer, shop_id, total_price, status, "
    "payment_info, paid_at, delivered_at, created_at"
)


class OrderRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create_order(self, order_data: dict[str, Any]) -> dict:
        """Inserts one single-seller order and returns the stored row."""
        query = f"""
            INSERT INTO orders (cart, shipping_address, buyer, buyer_id, shop_id, total_price, payment_info)
            VALUES ($1, $2, $3, $4, $5, $6, $7)
            RETURNING {ORDER_COLUMNS}
        """
        row = await self.db.fetchrow(
            query,
            order_data["cart"],
            order_data["shipping_address"],
            order_data["buyer"],
            order_data.get("buyer_id"),
            order_data.get("shop_id"),
            order_data["total_price"],
            order_data.get("payment_info"),
        )
        return dict(row)

    async def get_order_by_id(self, order_id: str) -> Optional[dict]:
        row = await self.db.fetchrow(f"SELECT {ORDER_COLUMNS} FROM orders WHERE id = $1", order_id)
        return dict(row) if row else None

    async def get_orders_by_buyer(self, buyer_id: str) -> list[dict]:
        rows = await self.db.fetch(
            f"SELECT {ORDER_COLUMNS} FROM orders WHERE buyer_id = $1 ORDER BY created_at DESC",
            buyer_id,
        )
        return [dict(row) for row in rows]

    async def get_orders_by_shop(self, shop_id: str) -> list[dict]:
        rows = await self.db.fetch(
            f"SELECT {ORDER_COLUMNS} FROM orders WHERE shop_id = $1 ORDER BY created_at DESC",
            shop_id,
        )
        return [dict(row) for row in rows]

    async def get_all_orders(self) -> list[dict]:
        rows = await self.db.fetch(
            f"""
            SELECT {ORDER_COLUMNS} FROM orders
            ORDER BY delivered_at DESC NULLS LAST, created_at DESC
            """
        )
        return [dict(row) for row in rows]

    async def update_status(
        self,
        order_id: str,
        status: str,
        delivered_at: Optional[datetime] = None,
        payment_info: Optional[dict[str, Any]] = None,
    ) -> Optional[dict]:
        """
        Stores a new status. Delivery time and payment info are only
        overwritten when given.
        """
        query = f"""
            UPDATE orders
            SET status = $2,
                delivered_at = COALESCE($3, delivered_at),
                payment_info = COALESCE($4, payment_info)
            WHERE id = $1
            RETURNING {ORDER_COLUMNS}
        """
        row = await self.db.fetchrow(query, order_id, status, delivered_at, payment_info)
        return dict(row) if row else None

    async def mark_cart_item_reviewed(self, order_id: str, product_id: str) -> None:
        """Flags the order lines for a product as reviewed."""
        await self.db.execute(
            """
            UPDATE orders
            SET cart = (
                SELECT jsonb_agg(
                    CASE WHEN item->>'_id' = $2
                         THEN item || '{"isReviewed": true}'::jsonb
                         ELSE item
                    END
                    ORDER BY position
                )
                FROM jsonb_array_elements(cart) WITH ORDINALITY AS lines(item, position)
            )
            WHERE id = $1
            """,
            order_id, product_id,
        )

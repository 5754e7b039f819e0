from typing import Any, Optional

from eshop.infra.database import DatabaseManager

EVENT_COLUMNS = (
    "id, name, description, category, start_date, finish_date, status, tags, "
    "original_price, discount_price, stock, images, shop_id, shop, sold_out, created_at"
)


class EventRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create_event(self, event_data: dict[str, Any]) -> dict:
        query = f"""
            INSERT INTO events (
                name, description, category, start_date, finish_date, tags,
                original_price, discount_price, stock, images, shop_id, shop
            )
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12)
            RETURNING {EVENT_COLUMNS}
        """
        row = await self.db.fetchrow(
            query,
            event_data["name"],
            event_data["description"],
            event_data["category"],
            event_data["start_date"],
            event_data["finish_date"],
            event_data.get("tags"),
            event_data.get("original_price"),
            event_data["discount_price"],
            event_data["stock"],
            event_data.get("images", []),
            event_data["shop_id"],
            event_data["shop"],
        )
        return dict(row)

    async def get_event_by_id(self, event_id: str) -> Optional[dict]:
        row = await self.db.fetchrow(f"SELECT {EVENT_COLUMNS} FROM events WHERE id = $1", event_id)
        return dict(row) if row else None

    async def get_events_by_shop(self, shop_id: str) -> list[dict]:
        rows = await self.db.fetch(
            f"SELECT {EVENT_COLUMNS} FROM events WHERE shop_id = $1 ORDER BY created_at", shop_id
        )
        return [dict(row) for row in rows]

    async def get_all_events(self, newest_first: bool = False) -> list[dict]:
        order = "DESC" if newest_first else "ASC"
        rows = await self.db.fetch(f"SELECT {EVENT_COLUMNS} FROM events ORDER BY created_at {order}")
        return [dict(row) for row in rows]

    async def delete_event(self, event_id: str) -> bool:
        status = await self.db.execute("DELETE FROM events WHERE id = $1", event_id)
        return status != "DELETE 0"

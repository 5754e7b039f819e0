from typing import Any, Optional

from eshop.infra.database import DatabaseManager

PRODUCT_COLUMNS = (
    "id, name, description, category, tags, original_price, discount_price, stock, "
    "images, reviews, ratings, shop_id, shop, sold_out, created_at"
)


class ProductRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create_product(self, product_data: dict[str, Any]) -> dict:
        query = f"""
            INSERT INTO products (
                name, description, category, tags, original_price,
                discount_price, stock, images, shop_id, shop
            )
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
            RETURNING {PRODUCT_COLUMNS}
        """
        row = await self.db.fetchrow(
            query,
            product_data["name"],
            product_data["description"],
            product_data["category"],
            product_data.get("tags"),
            product_data.get("original_price"),
            product_data["discount_price"],
            product_data["stock"],
            product_data.get("images", []),
            product_data["shop_id"],
            product_data["shop"],
        )
        return dict(row)

    async def get_product_by_id(self, product_id: str) -> Optional[dict]:
        row = await self.db.fetchrow(f"SELECT {PRODUCT_COLUMNS} FROM products WHERE id = $1", product_id)
        return dict(row) if row else None

    async def get_products_by_shop(self, shop_id: str) -> list[dict]:
        rows = await self.db.fetch(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE shop_id = $1 ORDER BY created_at", shop_id
        )
        return [dict(row) for row in rows]

    async def get_all_products(self) -> list[dict]:
        rows = await self.db.fetch(f"SELECT {PRODUCT_COLUMNS} FROM products ORDER BY created_at DESC")
        return [dict(row) for row in rows]

    async def delete_product(self, product_id: str) -> bool:
        status = await self.db.execute("DELETE FROM products WHERE id = $1", product_id)
        return status != "DELETE 0"

    async def update_reviews(self, product_id: str, reviews: list[dict[str, Any]], ratings: Optional[float]) -> None:
        await self.db.execute(
            "UPDATE products SET reviews = $2, ratings = $3 WHERE id = $1",
            product_id, reviews, ratings,
        )

    async def adjust_inventory(self, product_id: str, stock_delta: int, sold_out_delta: int) -> bool:
        """
        Shifts the stock and sold_out counters of one product.

        Products whose sold_out counter is NULL are left alone.

        Returns:
            True when a product row was changed
        """
        status = await self.db.execute(
            """
            UPDATE products
            SET stock = stock + $2, sold_out = sold_out + $3
            WHERE id = $1 AND sold_out IS NOT NULL
            """,
            product_id, stock_delta, sold_out_delta,
        )
        return status != "UPDATE 0"

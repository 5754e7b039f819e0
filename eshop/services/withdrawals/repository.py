from typing import Any, Optional

from eshop.common.constants import WithdrawStatus
from eshop.infra.database import DatabaseManager

WITHDRAW_COLUMNS = "id, seller, amount, status, created_at, updated_at"


class WithdrawRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create_withdraw(self, seller: dict[str, Any], seller_id: str, amount: float) -> dict:
        query = f"""
            INSERT INTO withdrawals (seller, seller_id, amount)
            VALUES ($1, $2, $3)
            RETURNING {WITHDRAW_COLUMNS}
        """
        row = await self.db.fetchrow(query, seller, seller_id, amount)
        return dict(row)

    async def get_all_withdraws(self) -> list[dict]:
        rows = await self.db.fetch(f"SELECT {WITHDRAW_COLUMNS} FROM withdrawals ORDER BY created_at DESC")
        return [dict(row) for row in rows]

    async def mark_succeeded(self, withdraw_id: str) -> Optional[dict]:
        query = f"""
            UPDATE withdrawals SET status = $2, updated_at = NOW()
            WHERE id = $1
            RETURNING {WITHDRAW_COLUMNS}
        """
        row = await self.db.fetchrow(query, withdraw_id, WithdrawStatus.SUCCEED.value)
        return dict(row) if row else None

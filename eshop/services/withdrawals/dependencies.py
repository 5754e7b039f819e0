from fastapi import Depends

from eshop.infra.database import get_db
from eshop.services.shops.dependencies import get_shop_repository
from eshop.services.shops.repository import ShopRepository
from eshop.services.withdrawals.repository import WithdrawRepository
from eshop.services.withdrawals.service import WithdrawService


def get_withdraw_repository() -> WithdrawRepository:
    return WithdrawRepository(get_db())


def get_withdraw_service(
    repository: WithdrawRepository = Depends(get_withdraw_repository),
    shops: ShopRepository = Depends(get_shop_repository),
) -> WithdrawService:
    return WithdrawService(repository, shops)

from fastapi import Depends

from eshop.infra.database import get_db
from eshop.services.shops.repository import ShopRepository
from eshop.services.shops.service import ShopService


def get_shop_repository() -> ShopRepository:
    return ShopRepository(get_db())


def get_shop_service(repository: ShopRepository = Depends(get_shop_repository)) -> ShopService:
    return ShopService(repository)

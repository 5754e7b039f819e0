from fastapi import Depends

from eshop.infra.database import get_db
from eshop.services.orders.repository import OrderRepository
from eshop.services.products.repository import ProductRepository
from eshop.services.products.service import ProductService
from eshop.services.shops.dependencies import get_shop_repository
from eshop.services.shops.repository import ShopRepository


def get_product_repository() -> ProductRepository:
    return ProductRepository(get_db())


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
    shops: ShopRepository = Depends(get_shop_repository),
) -> ProductService:
    return ProductService(repository, shops, OrderRepository(get_db()))

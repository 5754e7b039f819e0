from fastapi import Depends

from eshop.infra.database import get_db
from eshop.services.orders.repository import OrderRepository
from eshop.services.orders.service import OrderService
from eshop.services.products.dependencies import get_product_repository
from eshop.services.products.repository import ProductRepository
from eshop.services.shops.dependencies import get_shop_repository
from eshop.services.shops.repository import ShopRepository


def get_order_repository() -> OrderRepository:
    return OrderRepository(get_db())


def get_order_service(
    orders: OrderRepository = Depends(get_order_repository),
    products: ProductRepository = Depends(get_product_repository),
    shops: ShopRepository = Depends(get_shop_repository),
) -> OrderService:
    return OrderService(orders, products, shops)

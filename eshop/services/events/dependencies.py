from fastapi import Depends

from eshop.infra.database import get_db
from eshop.services.events.repository import EventRepository
from eshop.services.events.service import EventService
from eshop.services.shops.dependencies import get_shop_repository
from eshop.services.shops.repository import ShopRepository


def get_event_repository() -> EventRepository:
    return EventRepository(get_db())


def get_event_service(
    repository: EventRepository = Depends(get_event_repository),
    shops: ShopRepository = Depends(get_shop_repository),
) -> EventService:
    return EventService(repository, shops)

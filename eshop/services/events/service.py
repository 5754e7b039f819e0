from eshop.common.constants import TypeMsg
from eshop.common.exceptions import NotFoundError, ValidationError
from eshop.common.logger import log_info
from eshop.services.events.repository import EventRepository
from eshop.services.shops.repository import ShopRepository
from eshop.shared.models.product_dto import CreateEventRequest, EventDTO
from eshop.shared.models.shop_dto import ShopDTO


class EventService:
    def __init__(self, repository: EventRepository, shops: ShopRepository):
        self.repository = repository
        self.shops = shops

    async def create_event(self, request: CreateEventRequest) -> EventDTO:
        shop = await self.shops.get_shop_by_id(request.shop_id)
        if not shop:
            raise ValidationError("Shop Id is invalid!")

        event_data = request.model_dump()
        event_data["shop"] = ShopDTO.model_validate(shop).model_dump(by_alias=True, mode="json")
        event_data["images"] = [image.model_dump() for image in request.images]

        row = await self.repository.create_event(event_data)
        event = EventDTO.model_validate(row)
        await log_info(f"Event created: {event.id} (shop {event.shop_id})", type_msg=TypeMsg.INFO)
        return event

    async def get_all_events(self) -> list[EventDTO]:
        rows = await self.repository.get_all_events()
        return [EventDTO.model_validate(row) for row in rows]

    async def get_shop_events(self, shop_id: str) -> list[EventDTO]:
        rows = await self.repository.get_events_by_shop(shop_id)
        return [EventDTO.model_validate(row) for row in rows]

    async def get_all_events_for_admin(self) -> list[EventDTO]:
        rows = await self.repository.get_all_events(newest_first=True)
        return [EventDTO.model_validate(row) for row in rows]

    async def delete_event(self, event_id: str) -> None:
        if not await self.repository.delete_event(event_id):
            raise NotFoundError("Event is not found with this id", status_code=404)
        await log_info(f"Event deleted: {event_id}", type_msg=TypeMsg.INFO)

from fastapi import APIRouter, Depends, status

from eshop.services.auth.dependencies import AuthContext, require_admin
from eshop.services.events.dependencies import get_event_service
from eshop.services.events.service import EventService
from eshop.shared.models.product_dto import CreateEventRequest

router = APIRouter(prefix="/event", tags=["Events"])


@router.post("/create-event", status_code=status.HTTP_201_CREATED)
async def create_event(
    request: CreateEventRequest,
    service: EventService = Depends(get_event_service),
):
    event = await service.create_event(request)
    return {"success": True, "event": event}


@router.get("/get-all-events")
async def get_all_events(service: EventService = Depends(get_event_service)):
    events = await service.get_all_events()
    return {"success": True, "events": events}


@router.get("/get-all-events/{shop_id}")
async def get_shop_events(
    shop_id: str,
    service: EventService = Depends(get_event_service),
):
    events = await service.get_shop_events(shop_id)
    return {"success": True, "events": events}


@router.delete("/delete-shop-event/{event_id}")
async def delete_shop_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
):
    await service.delete_event(event_id)
    return {"success": True, "message": "Event Deleted successfully!"}


@router.get("/admin-all-events")
async def admin_all_events(
    auth: AuthContext = Depends(require_admin),
    service: EventService = Depends(get_event_service),
):
    events = await service.get_all_events_for_admin()
    return {"success": True, "events": events}

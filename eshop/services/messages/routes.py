from fastapi import APIRouter, Depends, status

from eshop.services.messages.dependencies import get_message_service
from eshop.services.messages.service import MessageService
from eshop.shared.models.conversation_dto import CreateMessageRequest

router = APIRouter(prefix="/message", tags=["Messages"])


@router.post("/create-new-message", status_code=status.HTTP_201_CREATED)
async def create_new_message(
    request: CreateMessageRequest,
    service: MessageService = Depends(get_message_service),
):
    message = await service.create_message(request)
    return {"success": True, "message": message}


@router.get("/get-all-messages/{conversation_id}")
async def get_all_messages(
    conversation_id: str,
    service: MessageService = Depends(get_message_service),
):
    messages = await service.get_conversation_messages(conversation_id)
    return {"success": True, "messages": messages}

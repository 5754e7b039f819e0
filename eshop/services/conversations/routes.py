from fastapi import APIRouter, Depends, status

from eshop.services.auth.dependencies import AuthContext, get_current_seller, get_current_user
from eshop.services.conversations.dependencies import get_conversation_service
from eshop.services.conversations.service import ConversationService
from eshop.shared.models.conversation_dto import CreateConversationRequest, UpdateLastMessageRequest

router = APIRouter(prefix="/conversation", tags=["Conversations"])


@router.post("/create-new-conversation", status_code=status.HTTP_201_CREATED)
async def create_new_conversation(
    request: CreateConversationRequest,
    service: ConversationService = Depends(get_conversation_service),
):
    conversation = await service.create_conversation(request)
    return {"success": True, "conversation": conversation}


@router.get("/get-all-conversation-seller/{seller_id}", status_code=status.HTTP_201_CREATED)
async def get_all_conversation_seller(
    seller_id: str,
    auth: AuthContext = Depends(get_current_seller),
    service: ConversationService = Depends(get_conversation_service),
):
    conversations = await service.get_member_conversations(seller_id)
    return {"success": True, "conversations": conversations}


@router.get("/get-all-conversation-user/{user_id}", status_code=status.HTTP_201_CREATED)
async def get_all_conversation_user(
    user_id: str,
    auth: AuthContext = Depends(get_current_user),
    service: ConversationService = Depends(get_conversation_service),
):
    conversations = await service.get_member_conversations(user_id)
    return {"success": True, "conversations": conversations}


@router.put("/update-last-message/{conversation_id}", status_code=status.HTTP_201_CREATED)
async def update_last_message(
    conversation_id: str,
    request: UpdateLastMessageRequest,
    service: ConversationService = Depends(get_conversation_service),
):
    conversation = await service.update_last_message(conversation_id, request)
    return {"success": True, "conversation": conversation}

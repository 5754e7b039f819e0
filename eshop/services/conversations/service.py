from typing import Optional

from eshop.common.constants import TypeMsg
from eshop.common.logger import log_info
from eshop.services.conversations.repository import ConversationRepository
from eshop.shared.models.conversation_dto import (
    ConversationDTO,
    CreateConversationRequest,
    UpdateLastMessageRequest,
)


class ConversationService:
    def __init__(self, repository: ConversationRepository):
        self.repository = repository

    async def create_conversation(self, request: CreateConversationRequest) -> ConversationDTO:
        """Returns the conversation with this group title, creating it if needed."""
        existing = await self.repository.get_conversation_by_title(request.group_title)
        if existing:
            return ConversationDTO.model_validate(existing)

        row = await self.repository.create_conversation(
            request.group_title, [request.user_id, request.seller_id]
        )
        conversation = ConversationDTO.model_validate(row)
        await log_info(f"Conversation created: {conversation.id}", type_msg=TypeMsg.INFO)
        return conversation

    async def get_member_conversations(self, member_id: str) -> list[ConversationDTO]:
        rows = await self.repository.get_conversations_by_member(member_id)
        return [ConversationDTO.model_validate(row) for row in rows]

    async def update_last_message(
        self, conversation_id: str, request: UpdateLastMessageRequest
    ) -> Optional[ConversationDTO]:
        row = await self.repository.update_last_message(
            conversation_id, request.last_message, request.last_message_id
        )
        return ConversationDTO.model_validate(row) if row else None

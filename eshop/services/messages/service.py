from eshop.services.messages.repository import MessageRepository
from eshop.shared.models.conversation_dto import CreateMessageRequest, MessageDTO
from eshop.shared.models.common import ImageDTO


class MessageService:
    def __init__(self, repository: MessageRepository):
        self.repository = repository

    async def create_message(self, request: CreateMessageRequest) -> MessageDTO:
        images = request.images
        if isinstance(images, str):
            images = ImageDTO(url=images)

        row = await self.repository.create_message(
            request.conversation_id,
            request.text,
            request.sender,
            images.model_dump() if images else None,
        )
        return MessageDTO.model_validate(row)

    async def get_conversation_messages(self, conversation_id: str) -> list[MessageDTO]:
        rows = await self.repository.get_messages_by_conversation(conversation_id)
        return [MessageDTO.model_validate(row) for row in rows]

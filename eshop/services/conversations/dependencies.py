from fastapi import Depends

from eshop.infra.database import get_db
from eshop.services.conversations.repository import ConversationRepository
from eshop.services.conversations.service import ConversationService


def get_conversation_repository() -> ConversationRepository:
    return ConversationRepository(get_db())


def get_conversation_service(
    repository: ConversationRepository = Depends(get_conversation_repository),
) -> ConversationService:
    return ConversationService(repository)

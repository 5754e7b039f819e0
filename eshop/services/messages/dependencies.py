from fastapi import Depends

from eshop.infra.database import get_db
from eshop.services.messages.repository import MessageRepository
from eshop.services.messages.service import MessageService


def get_message_repository() -> MessageRepository:
    return MessageRepository(get_db())


def get_message_service(repository: MessageRepository = Depends(get_message_repository)) -> MessageService:
    return MessageService(repository)

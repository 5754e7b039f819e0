from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from eshop.shared.models.common import DocumentModel, ImageDTO, RequestModel


class ConversationDTO(DocumentModel):
    id: str = Field(alias="_id")
    group_title: Optional[str] = Field(default=None, alias="groupTitle")
    members: list[str] = Field(default_factory=list)
    last_message: Optional[str] = Field(default=None, alias="lastMessage")
    last_message_id: Optional[str] = Field(default=None, alias="lastMessageId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class CreateConversationRequest(RequestModel):
    group_title: str = Field(alias="groupTitle")
    user_id: str = Field(alias="userId")
    seller_id: str = Field(alias="sellerId")


class UpdateLastMessageRequest(RequestModel):
    last_message: Optional[str] = Field(default=None, alias="lastMessage")
    last_message_id: Optional[str] = Field(default=None, alias="lastMessageId")


class MessageDTO(DocumentModel):
    id: str = Field(alias="_id")
    conversation_id: Optional[str] = Field(default=None, alias="conversationId")
    text: Optional[str] = None
    sender: Optional[str] = None
    images: Optional[Any] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class CreateMessageRequest(RequestModel):
    conversation_id: Optional[str] = Field(default=None, alias="conversationId")
    text: Optional[str] = None
    sender: Optional[str] = None
    images: Optional[ImageDTO | str] = None

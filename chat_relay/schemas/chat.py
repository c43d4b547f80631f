from pydantic import BaseModel, ConfigDict, Field


class ChatQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    q: str | None = None
    conversation_id: str | None = Field(default=None, alias="conversationId")
    parent_message_id: str | None = Field(default=None, alias="parentMessageId")
    message_id: str | None = Field(default=None, alias="messageId")


class ChatResponse(BaseModel):
    instance: str
    conversationId: str | None = None
    response: str | None = None
    messageId: str | None = None


class ChatError(BaseModel):
    error: str

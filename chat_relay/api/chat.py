from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from chat_relay.api.deps import get_chat_client, get_settings
from chat_relay.client.types import ChatClient
from chat_relay.core.config import Settings
from chat_relay.schemas.chat import ChatError, ChatQuery, ChatResponse
from chat_relay.services.relay_service import relay_message

router = APIRouter()


@router.get("/", summary="Relay a chat message to the shared chat client")
async def chat(
    q: str | None = Query(default=None),
    conversation_id: str | None = Query(default=None, alias="conversationId"),
    parent_message_id: str | None = Query(default=None, alias="parentMessageId"),
    message_id: str | None = Query(default=None, alias="messageId"),
    settings: Settings = Depends(get_settings),
    client: ChatClient = Depends(get_chat_client),
):
    query = ChatQuery(
        q=q,
        conversation_id=conversation_id,
        parent_message_id=parent_message_id,
        message_id=message_id,
    )
    instance = settings.instance_name
    outcome = await relay_message(client, query, instance=instance)

    if not outcome.ok:
        # Failures keep the configured status (200 unless overridden); the error is in the body.
        return JSONResponse(
            ChatError(error=outcome.error).model_dump(),
            status_code=settings.error_status_code,
            headers={"instance": instance},
        )

    result = outcome.result
    headers = {"instance": instance}
    if result.conversation_id:
        headers["conversationId"] = result.conversation_id
    body = ChatResponse(instance=instance, **result.to_dict())
    return JSONResponse(body.model_dump(), headers=headers)

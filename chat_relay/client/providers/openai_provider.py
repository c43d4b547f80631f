from __future__ import annotations

import logging
import os
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from openai import AsyncOpenAI

from chat_relay.client.types import ChatResult, ClientOptions

logger = logging.getLogger(__name__)

_max_history = 6
_max_stored_messages = 10_000


@dataclass(frozen=True)
class _StoredMessage:
    id: str
    role: str
    content: str
    conversation_id: str
    parent_id: str | None


class OpenAIChatClient:
    """Chat client backed by the OpenAI chat completions API.

    Conversations are threaded in memory the same way the upstream web client
    threads them: every message has an id and a parent id, and the reply's id
    is what the caller sends back as `parentMessageId` on the next turn.
    Nothing survives a restart.
    """

    def __init__(
        self,
        options: ClientOptions,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 2,
        temperature: float = 0.2,
        max_stored_messages: int = _max_stored_messages,
    ):
        self._options = options
        self._model = (model or os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip()
        self._temperature = temperature
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=float(os.getenv("OPENAI_TIMEOUT_S", str(timeout_s))),
            max_retries=int(os.getenv("OPENAI_MAX_RETRIES", str(max_retries))),
        )
        self._max_stored = max_stored_messages
        self._messages: OrderedDict[str, _StoredMessage] = OrderedDict()
        self._latest: dict[str, str] = {}

    async def init_session(self) -> None:
        await self._client.models.retrieve(self._model)
        logger.info("openai session ready model=%s", self._model)

    async def close(self) -> None:
        await self._client.close()

    def _history(self, conversation_id: str, parent_message_id: str | None) -> list[_StoredMessage]:
        cursor = parent_message_id if parent_message_id in self._messages else self._latest.get(conversation_id)
        chain: list[_StoredMessage] = []
        while cursor and len(chain) < _max_history:
            stored = self._messages.get(cursor)
            if stored is None:
                break
            chain.append(stored)
            cursor = stored.parent_id
        chain.reverse()
        return chain

    def _store(self, message: _StoredMessage) -> None:
        self._messages[message.id] = message
        self._messages.move_to_end(message.id)
        self._latest[message.conversation_id] = message.id
        while len(self._messages) > self._max_stored:
            _, evicted = self._messages.popitem(last=False)
            if self._latest.get(evicted.conversation_id) == evicted.id:
                del self._latest[evicted.conversation_id]

    async def send_message(
        self,
        prompt: str | None,
        *,
        conversation_id: str | None = None,
        parent_message_id: str | None = None,
        message_id: str | None = None,
    ) -> ChatResult:
        parent = self._messages.get(parent_message_id) if parent_message_id else None
        if not conversation_id:
            conversation_id = parent.conversation_id if parent else str(uuid.uuid4())

        history = self._history(conversation_id, parent_message_id)
        payload = [{"role": m.role, "content": m.content} for m in history]
        payload.append({"role": "user", "content": prompt or ""})
        if self._options.debug:
            logger.debug(
                "openai request conversation=%s history=%d prompt_len=%d",
                conversation_id,
                len(history),
                len(prompt or ""),
            )

        create_kwargs = {
            "model": self._model,
            "messages": payload,
            "temperature": self._temperature,
        }
        if self._options.email:
            create_kwargs["user"] = self._options.email

        completion = await self._client.chat.completions.create(**create_kwargs)
        reply = completion.choices[0].message.content or ""

        user_message = _StoredMessage(
            id=message_id or str(uuid.uuid4()),
            role="user",
            content=prompt or "",
            conversation_id=conversation_id,
            parent_id=history[-1].id if history else None,
        )
        self._store(user_message)
        assistant_message = _StoredMessage(
            id=str(uuid.uuid4()),
            role="assistant",
            content=reply,
            conversation_id=conversation_id,
            parent_id=user_message.id,
        )
        self._store(assistant_message)

        return ChatResult(
            conversation_id=conversation_id,
            response=reply,
            message_id=assistant_message.id,
        )


def from_options(options: ClientOptions) -> OpenAIChatClient:
    return OpenAIChatClient(options)

from dataclasses import dataclass
from typing import Any, Mapping, Protocol


@dataclass(frozen=True)
class ClientOptions:
    email: str | None
    password: str | None
    debug: bool = False
    minimize: bool = True


def _text(value: Any) -> str | None:
    return None if value is None else str(value)


@dataclass(frozen=True)
class ChatResult:
    conversation_id: str | None = None
    response: str | None = None
    message_id: str | None = None

    @classmethod
    def coerce(cls, value: Any) -> "ChatResult":
        """Accept a ChatResult or a camelCase mapping returned by a plug-in client."""
        if isinstance(value, cls):
            value = value.to_dict()
        if isinstance(value, Mapping):
            return cls(
                conversation_id=_text(value.get("conversationId")),
                response=_text(value.get("response")),
                message_id=_text(value.get("messageId")),
            )
        raise TypeError(f"Unsupported chat result type: {type(value).__name__}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "conversationId": self.conversation_id,
            "response": self.response,
            "messageId": self.message_id,
        }


class ChatClient(Protocol):
    async def init_session(self) -> None: ...

    async def send_message(
        self,
        prompt: str | None,
        *,
        conversation_id: str | None = None,
        parent_message_id: str | None = None,
        message_id: str | None = None,
    ) -> ChatResult: ...

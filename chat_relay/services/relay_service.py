from __future__ import annotations

import hashlib
import json
import logging
import time
from dataclasses import dataclass

from chat_relay.client.types import ChatClient, ChatResult
from chat_relay.schemas.chat import ChatQuery

logger = logging.getLogger("chat_relay.chat")


@dataclass(frozen=True)
class RelayOutcome:
    result: ChatResult | None = None
    error: str | None = None
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


def _short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def _elapsed_ms(started_at: float) -> int:
    return int((time.perf_counter() - started_at) * 1000)


async def relay_message(client: ChatClient, query: ChatQuery, *, instance: str) -> RelayOutcome:
    """Forward one chat query to the shared client and capture the result or error."""
    started_at = time.perf_counter()
    logger.info(
        json.dumps(
            {
                "event": "chat_request",
                "instance": instance,
                "conversation_hash": _short_hash(query.conversation_id),
                "parent_message_hash": _short_hash(query.parent_message_id),
                "message_id_hash": _short_hash(query.message_id),
                "message_len": len(query.q or ""),
                "message_hash": _short_hash(query.q),
            }
        )
    )

    try:
        raw = await client.send_message(
            query.q,
            conversation_id=query.conversation_id,
            parent_message_id=query.parent_message_id,
            message_id=query.message_id,
        )
        result = ChatResult.coerce(raw)
    except Exception as ex:
        duration_ms = _elapsed_ms(started_at)
        logger.exception(
            json.dumps(
                {
                    "event": "chat_error",
                    "instance": instance,
                    "error": str(ex),
                    "duration_ms": duration_ms,
                }
            )
        )
        return RelayOutcome(error=str(ex), duration_ms=duration_ms)

    duration_ms = _elapsed_ms(started_at)
    logger.info(
        json.dumps(
            {
                "event": "chat_complete",
                "instance": instance,
                "duration_ms": duration_ms,
                "result": result.to_dict(),
            }
        )
    )
    return RelayOutcome(result=result, duration_ms=duration_ms)

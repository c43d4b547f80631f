from fastapi import Request

from chat_relay.client.types import ChatClient
from chat_relay.core.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_chat_client(request: Request) -> ChatClient:
    return request.app.state.chat_client

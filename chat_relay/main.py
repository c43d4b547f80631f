import logging

from fastapi import FastAPI
import sentry_sdk

from chat_relay.api.chat import router as chat_router
from chat_relay.api.health import router as health_router
from chat_relay.client.factory import get_chat_client
from chat_relay.client.types import ChatClient
from chat_relay.core.config import Settings, load_settings
from chat_relay.core.lifespan import lifespan


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn)


def create_app(settings: Settings | None = None, client: ChatClient | None = None) -> FastAPI:
    if settings is None:
        settings = load_settings()
    if client is None:
        client = get_chat_client(settings)

    app = FastAPI(title="Chat Relay", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.chat_client = client

    app.include_router(health_router, tags=["Health"])
    app.include_router(chat_router, tags=["Chat"])
    return app

from contextlib import asynccontextmanager
import inspect
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    client = app.state.chat_client
    await client.init_session()
    settings = app.state.settings
    logger.info("chat session initialized instance=%s port=%s", settings.instance_name, settings.port)

    yield

    close = getattr(client, "close", None)
    if close is not None:
        result = close()
        if inspect.isawaitable(result):
            await result

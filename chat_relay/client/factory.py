from __future__ import annotations

import importlib
from typing import Any, Callable

from chat_relay.client.types import ChatClient, ClientOptions
from chat_relay.core.config import Settings
from chat_relay.core.exceptions import ClientLoadError


def client_options(settings: Settings) -> ClientOptions:
    return ClientOptions(
        email=settings.credentials.email,
        password=settings.credentials.password,
        debug=settings.client_debug,
        minimize=settings.client_minimize,
    )


def load_client_factory(path: str) -> Callable[[ClientOptions], Any]:
    """Resolve a `package.module:attribute` path to a client class or factory."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ClientLoadError(f"Unsupported CHAT_CLIENT='{path}', expected 'openai' or 'module:attribute'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ClientLoadError(f"Cannot import chat client module '{module_name}': {e}") from e
    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ClientLoadError(f"'{module_name}' has no attribute '{attr}'") from e
    if not callable(target):
        raise ClientLoadError(f"CHAT_CLIENT target '{path}' is not callable")
    return target


def get_chat_client(settings: Settings) -> ChatClient:
    options = client_options(settings)

    if settings.chat_client == "openai":
        from chat_relay.client.providers.openai_provider import from_options

        return from_options(options)

    return load_client_factory(settings.chat_client)(options)

from .factory import get_chat_client, load_client_factory
from .types import ChatClient, ChatResult, ClientOptions

__all__ = ["ChatClient", "ChatResult", "ClientOptions", "get_chat_client", "load_client_factory"]

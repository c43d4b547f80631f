import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chat_relay.core.config import Settings
from chat_relay.core.credentials import Credentials
from chat_relay.main import create_app
from tests.stubs import StubChatClient


def _app():
    settings = Settings(instance_name="relay-0", credentials=Credentials(email="a@example.com", password="pw"))
    return create_app(settings, StubChatClient())


def test_relay_routes_are_registered() -> None:
    paths = {route.path for route in _app().routes}

    assert "/" in paths
    assert "/ready" in paths


def test_shared_client_is_held_on_app_state() -> None:
    stub = StubChatClient()
    settings = Settings(instance_name="relay-0", credentials=Credentials(email="a@example.com", password="pw"))
    app = create_app(settings, stub)

    assert app.state.chat_client is stub
    assert app.state.settings is settings


class _FalsyClient(StubChatClient):
    def __len__(self) -> int:
        return 0


def test_falsy_injected_client_is_kept() -> None:
    stub = _FalsyClient()
    settings = Settings(instance_name="relay-0", credentials=Credentials(email="a@example.com", password="pw"))

    app = create_app(settings, stub)

    assert app.state.chat_client is stub

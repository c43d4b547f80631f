from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from chat_relay.api.deps import get_settings
from chat_relay.core.config import Settings

router = APIRouter()


@router.get("/ready", response_class=PlainTextResponse, summary="Readiness Check")
async def ready(settings: Settings = Depends(get_settings)):
    return f"ok, {settings.instance_name}"

from __future__ import annotations

import os
import socket
from dataclasses import dataclass
from typing import Mapping

from chat_relay.core.credentials import EMAIL_VAR, PASSWORD_VAR, Credentials, resolve_credentials
from chat_relay.core.exceptions import ConfigError

DEFAULT_PORT = 3000

# Levels understood by both logging.basicConfig and uvicorn.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _get_env(environ: Mapping[str, str], name: str, default: str | None = None) -> str | None:
    value = environ.get(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _get_env(environ, name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _get_env(environ, name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    instance_name: str
    credentials: Credentials
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    sentry_dsn: str | None = None
    chat_client: str = "openai"
    client_debug: bool = False
    client_minimize: bool = True
    error_status_code: int = 200


def load_settings(
    environ: Mapping[str, str] | None = None,
    hostname: str | None = None,
) -> Settings:
    env = os.environ if environ is None else environ
    instance_name = _get_env(env, "INSTANCE_NAME") or hostname or socket.gethostname()

    credentials = resolve_credentials(env, instance_name)
    if not credentials.complete:
        raise ConfigError(
            f"{EMAIL_VAR} and {PASSWORD_VAR} must be set "
            f"(or {EMAIL_VAR}_<idx>/{PASSWORD_VAR}_<idx> for host {instance_name!r})."
        )

    error_status_code = _get_env_int(env, "RELAY_ERROR_STATUS_CODE", 200)
    if not 100 <= error_status_code <= 599:
        raise ConfigError(f"RELAY_ERROR_STATUS_CODE must be a valid HTTP status, got {error_status_code}")

    log_level = (_get_env(env, "LOG_LEVEL", "INFO") or "INFO").strip().upper()
    log_level = _LOG_LEVEL_ALIASES.get(log_level, log_level)
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        instance_name=instance_name,
        credentials=credentials,
        host=_get_env(env, "HOST", "0.0.0.0") or "0.0.0.0",
        port=_get_env_int(env, "PORT", DEFAULT_PORT),
        log_level=log_level,
        sentry_dsn=_get_env(env, "SENTRY_DSN"),
        chat_client=(_get_env(env, "CHAT_CLIENT", "openai") or "openai").strip(),
        client_debug=_get_env_bool(env, "CHAT_CLIENT_DEBUG", False),
        client_minimize=_get_env_bool(env, "CHAT_CLIENT_MINIMIZE", True),
        error_status_code=error_status_code,
    )

from __future__ import annotations

import logging
import os
import socket
from pathlib import Path

from dotenv import dotenv_values, load_dotenv

from chat_relay.core.credentials import EMAIL_VAR, PASSWORD_VAR, resolve_credentials
from chat_relay.core.exceptions import MissingEnvVarsError

logger = logging.getLogger(__name__)


def required_keys(manifest: str | Path) -> list[str]:
    path = Path(manifest)
    if not path.exists():
        return []
    return [key for key in dotenv_values(path) if key]


def load_env(
    env_file: str | Path = ".env",
    manifest: str | Path = ".env.example",
    hostname: str | None = None,
) -> None:
    """Load `env_file` into the process environment and check it against `manifest`.

    Variables already set in the environment are kept. Every key named in the
    manifest must end up set to a non-empty value; a missing manifest file
    disables the check. The credential keys also count as set when their
    host-indexed variant (`OPENAI_EMAIL_<idx>`) resolves for this host.
    """
    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        logger.debug("env file %s not found, using process environment only", env_path)

    instance_name = os.environ.get("INSTANCE_NAME") or hostname or socket.gethostname()
    credentials = resolve_credentials(os.environ, instance_name)
    resolved = {EMAIL_VAR: credentials.email, PASSWORD_VAR: credentials.password}

    missing = [
        key for key in required_keys(manifest) if not (os.environ.get(key) or resolved.get(key))
    ]
    if missing:
        raise MissingEnvVarsError(missing, str(manifest))

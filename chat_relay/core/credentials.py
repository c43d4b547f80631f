from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

EMAIL_VAR = "OPENAI_EMAIL"
PASSWORD_VAR = "OPENAI_PASSWORD"


@dataclass(frozen=True)
class Credentials:
    email: str | None
    password: str | None

    @property
    def complete(self) -> bool:
        return bool(self.email) and bool(self.password)


def host_index(hostname: str) -> str:
    """Last `-`-separated segment of the host name (`worker-3` -> `3`)."""
    return hostname.split("-")[-1]


def _lookup(environ: Mapping[str, str], name: str, index: str) -> str | None:
    value = environ.get(name)
    if value:
        return value
    return environ.get(f"{name}_{index}") or None


def resolve_credentials(environ: Mapping[str, str], hostname: str) -> Credentials:
    """Pick the email/password pair for this host.

    Unindexed variables win. When one is missing, the `<NAME>_<idx>` variant
    keyed by the host name suffix is used instead, so a pool of replicas
    (`chat-0`, `chat-1`, ...) can share one env file with one account each.
    """
    index = host_index(hostname)
    return Credentials(
        email=_lookup(environ, EMAIL_VAR, index),
        password=_lookup(environ, PASSWORD_VAR, index),
    )

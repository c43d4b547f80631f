from .config import Settings, load_settings
from .credentials import Credentials, host_index, resolve_credentials
from .exceptions import ClientLoadError, ConfigError, MissingEnvVarsError

__all__ = [
    "Settings",
    "load_settings",
    "Credentials",
    "host_index",
    "resolve_credentials",
    "ConfigError",
    "MissingEnvVarsError",
    "ClientLoadError",
]

class ConfigError(Exception):
    """Raised when settings cannot be built from the environment."""


class MissingEnvVarsError(ConfigError):
    """Raised when keys listed in the env manifest are absent or empty."""

    def __init__(self, missing: list[str], manifest: str):
        self.missing = missing
        self.manifest = manifest
        super().__init__(
            f"Missing environment variables required by {manifest}: {', '.join(missing)}"
        )


class ClientLoadError(ConfigError):
    """Raised when the configured chat client cannot be imported or built."""

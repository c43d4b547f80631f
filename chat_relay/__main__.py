import argparse

import uvicorn

from chat_relay.core.config import load_settings
from chat_relay.core.env import load_env
from chat_relay.main import configure_logging, create_app


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Chat relay server")
    parser.add_argument("--env-file", default=".env", help="env file to load (default: .env)")
    parser.add_argument(
        "--manifest",
        default=".env.example",
        help="file listing required variables (default: .env.example)",
    )
    args = parser.parse_args(argv)

    load_env(args.env_file, args.manifest)
    settings = load_settings()
    configure_logging(settings)

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

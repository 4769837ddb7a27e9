"""ASGI app built from configuration, and the server entry point."""

import uvicorn

from slashgate.adapters.handlers import HANDLERS
from slashgate.adapters.web.server import create_app
from slashgate.config import AppConfig

settings = AppConfig.from_env()

app = create_app(
    settings.tokens,
    [HANDLERS[settings.handler]()],
    path=settings.server.path,
)


def main():
    print("Slash command server starting")
    print(f"Handler: {settings.handler}")
    print(f"Endpoint: {settings.server.path} ({len(settings.tokens)} token(s))")
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_level="info")


if __name__ == "__main__":
    main()

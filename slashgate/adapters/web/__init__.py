"""Web adapter — FastAPI endpoint for slash command webhooks."""

from slashgate.adapters.web.server import StatusResponse, build_router, create_app, read_body

__all__ = ["StatusResponse", "build_router", "create_app", "read_body"]

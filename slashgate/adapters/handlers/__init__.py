"""Ready-made handlers for common slash commands."""

from slashgate.adapters.handlers.clock import ClockHandler
from slashgate.adapters.handlers.echo import EchoHandler

# Name -> factory, used by config-driven startup
HANDLERS = {
    "echo": EchoHandler,
    "clock": ClockHandler,
}

__all__ = ["ClockHandler", "EchoHandler", "HANDLERS"]

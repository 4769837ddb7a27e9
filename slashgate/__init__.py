"""slashgate — authenticated slash command dispatch over HTTP."""

from slashgate.domain import (
    INVALID_TOKEN_MESSAGE,
    CredentialSet,
    Dispatcher,
    FormDecodeError,
    HandlerResult,
    SlashCommand,
    authenticate,
    parse_slash_command,
)
from slashgate.ports import Handler
from slashgate.adapters.web.server import build_router, create_app

__all__ = [
    "INVALID_TOKEN_MESSAGE",
    "CredentialSet",
    "Dispatcher",
    "FormDecodeError",
    "HandlerResult",
    "SlashCommand",
    "authenticate",
    "parse_slash_command",
    "Handler",
    "build_router",
    "create_app",
]

"""Request pipeline: parse -> authenticate -> route -> invoke -> render.

Pure Python, no framework dependencies. Every path ends in a body string;
failures are reported as text, never as exceptions or status codes.

Synchronous handler code (predicates and sync ``handle``) runs in a worker
thread so a slow handler only holds up its own request.
"""

import asyncio
import inspect
from typing import Iterable, Optional, Tuple

from slashgate.domain.credentials import CredentialSet, authenticate
from slashgate.domain.models import HandlerResult, SlashCommand
from slashgate.domain.parser import FormDecodeError, RawForm, parse_slash_command
from slashgate.ports.inbound import Handler

INVALID_TOKEN_MESSAGE = "Invalid API token. Check configuration."


def _error_text(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class Dispatcher:
    """Routes authenticated slash commands to the first willing handler.

    ``tokens`` are the accepted API tokens; pass at least one or every
    request is rejected. ``handlers`` are tried in the given order for every
    request. Both are frozen here and only read afterwards, so one instance
    can serve concurrent requests.
    """

    def __init__(self, tokens: Iterable[str], handlers: Iterable[Handler] = ()):
        self._credentials = tokens if isinstance(tokens, CredentialSet) else CredentialSet(tokens)
        self._handlers: Tuple[Handler, ...] = tuple(handlers)
        for handler in self._handlers:
            if not isinstance(handler, Handler):
                raise TypeError(
                    f"{type(handler).__name__} does not implement can_handle/handle"
                )

    @property
    def credentials(self) -> CredentialSet:
        return self._credentials

    @property
    def handlers(self) -> Tuple[Handler, ...]:
        return self._handlers

    def authenticate(self, command: SlashCommand) -> bool:
        return authenticate(command, self._credentials)

    def route(self, command: SlashCommand) -> Optional[Handler]:
        """Return the first handler whose can_handle accepts the command."""
        for handler in self._handlers:
            if handler.can_handle(command):
                return handler
        return None

    async def invoke(self, handler: Handler, command: SlashCommand) -> HandlerResult:
        try:
            if inspect.iscoroutinefunction(handler.handle):
                result = handler.handle(command)
            else:
                result = await asyncio.to_thread(handler.handle, command)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            return HandlerResult.fail(_error_text(e))
        if isinstance(result, HandlerResult):
            return result
        if result is None:
            return HandlerResult.ok()
        return HandlerResult.ok(str(result))

    async def dispatch(self, command: SlashCommand) -> str:
        """Authenticate, route and invoke; return the response body."""
        if not self.authenticate(command):
            return INVALID_TOKEN_MESSAGE

        handler = await asyncio.to_thread(self.route, command)
        if handler is None:
            return ""

        result = await self.invoke(handler, command)
        return result.rendered

    async def respond(
        self,
        method: str = "POST",
        content_type: str = "",
        query: RawForm = b"",
        body: RawForm = b"",
    ) -> str:
        """Run the whole pipeline on raw request data."""
        try:
            command = parse_slash_command(method, content_type, query, body)
        except FormDecodeError as e:
            return str(e)
        return await self.dispatch(command)

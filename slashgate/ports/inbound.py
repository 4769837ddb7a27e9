"""Inbound port — the contract every slash command handler implements."""

from typing import Awaitable, Protocol, Union, runtime_checkable

from slashgate.domain.models import HandlerResult, SlashCommand

HandleReturn = Union[HandlerResult, str]


@runtime_checkable
class Handler(Protocol):
    """Interface for units that answer slash commands.

    A dispatcher asks each registered handler, in registration order, whether
    it can handle a command; the first one that says yes gets ``handle``
    called exactly once. ``handle`` may return a HandlerResult, a plain
    string, or an awaitable of either. Raising is the same as returning
    ``HandlerResult.fail(exc)``. An empty reply is fine when the handler
    answers the user some other way.

    ``can_handle`` and a non-coroutine ``handle`` are called from a worker
    thread, so they may block; coroutine ``handle`` methods run on the loop.
    """

    def can_handle(self, command: SlashCommand) -> bool: ...

    def handle(
        self, command: SlashCommand
    ) -> Union[HandleReturn, Awaitable[HandleReturn]]: ...

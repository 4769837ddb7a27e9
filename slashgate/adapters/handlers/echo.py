"""Echo handler: repeats the command back to the user."""

from slashgate.domain.models import HandlerResult, SlashCommand


class EchoHandler:
    """Unconditionally echoes any command as the user typed it."""

    def can_handle(self, command: SlashCommand) -> bool:
        return True

    def handle(self, command: SlashCommand) -> HandlerResult:
        return HandlerResult.ok(f"{command.command} {command.text}")

"""Current time in an IANA time zone, as a slash command."""

from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from slashgate.domain.models import HandlerResult, SlashCommand


def load_zone(name: str) -> tzinfo:
    """Resolve a zone name; "" and "UTC" are UTC, "Local" is the host zone."""
    if name in ("", "UTC"):
        return timezone.utc
    if name == "Local":
        return datetime.now().astimezone().tzinfo
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise LookupError(f"unknown time zone {name}") from e


def format_unix_date(moment: datetime) -> str:
    """Format like `date`: ``Mon Jan  2 15:04:05 MST 2006``."""
    return (
        f"{moment:%a %b} {moment.day:>2} {moment:%H:%M:%S} "
        f"{moment.tzname() or 'UTC'} {moment.year}"
    )


class ClockHandler:
    """Replies with the current time in the zone given as the command text.

    With ``command`` set, only that command keyword (e.g. "/time") is
    accepted; otherwise every command is.
    """

    def __init__(
        self,
        command: Optional[str] = None,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.command = command
        self._now = now

    def can_handle(self, command: SlashCommand) -> bool:
        return self.command is None or command.command == self.command

    def handle(self, command: SlashCommand) -> HandlerResult:
        try:
            zone = load_zone(command.text.strip())
        except LookupError as e:
            return HandlerResult.fail(e)
        return HandlerResult.ok(format_unix_date(self._now().astimezone(zone)))

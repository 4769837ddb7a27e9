"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SlashCommand:
    """One slash command as posted by the chat platform.

    Every field is a plain string and defaults to "" when the request did
    not carry it. Only ``token`` is checked later on.
    """

    channel_id: str = ""
    channel_name: str = ""
    command: str = ""  # e.g. "/weather"
    team_domain: str = ""
    team_id: str = ""
    text: str = ""
    token: str = ""
    user_id: str = ""
    user_name: str = ""


@dataclass(frozen=True)
class HandlerResult:
    """Outcome of a single Handler.handle call."""

    text: str = ""
    error: Optional[str] = None

    def __post_init__(self):
        if self.error is not None and self.text:
            raise ValueError("HandlerResult cannot carry both text and an error")

    @classmethod
    def ok(cls, text: str = "") -> "HandlerResult":
        return cls(text=text)

    @classmethod
    def fail(cls, error) -> "HandlerResult":
        return cls(error=str(error))

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def rendered(self) -> str:
        """Body text sent back to the caller."""
        return self.error if self.error is not None else self.text

"""Port interfaces (Hexagonal Architecture)."""

from slashgate.ports.inbound import Handler, HandleReturn

__all__ = [
    "Handler",
    "HandleReturn",
]

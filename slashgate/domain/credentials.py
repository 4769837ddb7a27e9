"""Shared-secret tokens accepted by a dispatcher."""

from typing import FrozenSet, Iterable, Iterator

from slashgate.domain.models import SlashCommand


class CredentialSet:
    """Immutable set of accepted API tokens.

    Membership is an exact string match. An empty string is a valid token
    when it is configured explicitly; an empty set accepts nothing.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str] = ()):
        if isinstance(tokens, str):
            tokens = (tokens,)
        self._tokens: FrozenSet[str] = frozenset(tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"CredentialSet(<{len(self._tokens)} tokens>)"


def authenticate(command: SlashCommand, credentials: CredentialSet) -> bool:
    """True iff the command's token is one of the accepted tokens."""
    return command.token in credentials

"""Domain layer — pure Python, no framework dependencies."""

from slashgate.domain.models import HandlerResult, SlashCommand
from slashgate.domain.parser import (
    FORM_FIELDS,
    MAX_FORM_BYTES,
    FormDecodeError,
    decode_form,
    parse_form,
    parse_slash_command,
)
from slashgate.domain.credentials import CredentialSet, authenticate
from slashgate.domain.dispatcher import INVALID_TOKEN_MESSAGE, Dispatcher

__all__ = [
    "HandlerResult",
    "SlashCommand",
    "FORM_FIELDS",
    "MAX_FORM_BYTES",
    "FormDecodeError",
    "decode_form",
    "parse_form",
    "parse_slash_command",
    "CredentialSet",
    "authenticate",
    "INVALID_TOKEN_MESSAGE",
    "Dispatcher",
]

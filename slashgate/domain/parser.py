"""Form decoding and SlashCommand extraction.

Pure Python, no framework dependencies. Decoding is strict about escapes
and separators (a malformed payload is reported, not guessed at) and lenient
about everything else: unknown keys are ignored and missing keys become "".
"""

import re
from typing import Dict, Mapping, Optional, Tuple, Union
from urllib.parse import unquote_to_bytes

from slashgate.domain.models import SlashCommand

# Form key -> SlashCommand attribute
FORM_FIELDS: Dict[str, str] = {
    "channel_id": "channel_id",
    "channel_name": "channel_name",
    "command": "command",
    "team_domain": "team_domain",
    "team_id": "team_id",
    "text": "text",
    "token": "token",
    "user_id": "user_id",
    "user_name": "user_name",
}

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Only these methods carry a form body
BODY_METHODS = ("POST", "PUT", "PATCH")

MAX_FORM_BYTES = 10 << 20

# A "%" that is not the start of a two-digit hex escape
_BAD_ESCAPE_RE = re.compile(rb"%(?![0-9A-Fa-f]{2})")

RawForm = Union[str, bytes]


class FormDecodeError(ValueError):
    """Raised when request data cannot be decoded as form data."""


def _unescape(raw: bytes) -> str:
    bad = _BAD_ESCAPE_RE.search(raw)
    if bad:
        escape = raw[bad.start():bad.start() + 3].decode("utf-8", errors="replace")
        raise FormDecodeError(f'invalid URL escape "{escape}"')
    return unquote_to_bytes(raw.replace(b"+", b" ")).decode("utf-8", errors="replace")


def decode_form(raw: RawForm, into: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Decode ``a=1&b=2`` style data into a dict of first values.

    Keys already present in ``into`` are left alone, so decoding the body
    first and the query string second gives body values precedence.
    """
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    values: Dict[str, str] = {} if into is None else into
    for pair in raw.split(b"&"):
        if not pair:
            continue
        if b";" in pair:
            raise FormDecodeError("invalid semicolon separator in query")
        key, _, value = pair.partition(b"=")
        values.setdefault(_unescape(key), _unescape(value))
    return values


# Content-Type token delimiters
_TSPECIALS = frozenset('()<>@,;:\\"/[]?=')


def _consume_token(value: str) -> Tuple[str, str]:
    end = 0
    while end < len(value) and " " < value[end] < "\x7f" and value[end] not in _TSPECIALS:
        end += 1
    return value[:end], value[end:]


def _media_type(content_type: str) -> str:
    """Lower-cased ``type/subtype`` of a Content-Type header.

    A missing header counts as ``application/octet-stream``. Parameters
    after ";" are not validated.
    """
    if not content_type:
        return "application/octet-stream"
    media = content_type.split(";", 1)[0].strip().lower()
    kind, rest = _consume_token(media)
    if not kind:
        raise FormDecodeError("mime: no media type")
    if not rest:
        return media
    if not rest.startswith("/"):
        raise FormDecodeError("mime: expected slash after first token")
    subtype, rest = _consume_token(rest[1:])
    if not subtype:
        raise FormDecodeError("mime: expected token after slash")
    if rest:
        raise FormDecodeError("mime: unexpected content after media subtype")
    return media


def parse_form(form: Mapping[str, str]) -> SlashCommand:
    """Build a SlashCommand from already-decoded form values."""
    return SlashCommand(
        **{attr: form.get(key, "") for key, attr in FORM_FIELDS.items()}
    )


def parse_slash_command(
    method: str = "POST",
    content_type: str = "",
    query: RawForm = b"",
    body: RawForm = b"",
) -> SlashCommand:
    """Decode a request's query string and form body into a SlashCommand.

    Raises FormDecodeError when either part is malformed.
    """
    form: Dict[str, str] = {}
    if method.upper() in BODY_METHODS and _media_type(content_type) == FORM_CONTENT_TYPE:
        if len(body) > MAX_FORM_BYTES:
            raise FormDecodeError("http: POST too large")
        decode_form(body, into=form)
    decode_form(query, into=form)
    return parse_form(form)

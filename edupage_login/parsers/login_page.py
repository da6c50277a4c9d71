"""Text-delimiter extraction for the two EduPage pages the login flow reads.

Both helpers work against the exact markup the portal emits today and raise
instead of guessing when it changes.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from ..errors import InvalidResponseError, ParseError
from ..models import UserData

CSRF_FIELD = "csrfauth"
CSRF_MARKER = 'name="csrfauth" value="'
STARTUP_MARKER = "$j(document).ready(function() {"
USERHOME_MARKER = "userhome("

_JSON_NOISE = str.maketrans("", "", "\t\r\n")
_DECODER = json.JSONDecoder()


def extract_csrf_token(html: str) -> str:
    """Returns the value of the hidden ``csrfauth`` input on the login form."""

    if CSRF_FIELD not in html:
        raise InvalidResponseError("login page does not contain a csrfauth field")

    _, found, tail = html.partition(CSRF_MARKER)
    if not found:
        raise ParseError("csrfauth field has no value attribute")

    token, closed, _ = tail.partition('"')
    if not closed:
        raise ParseError("csrfauth value is not terminated")
    if not token:
        raise ParseError("csrfauth value is empty")

    logging.debug("Extracted csrf token (%s chars)", len(token))
    return token


def has_user_payload(html: str) -> bool:
    return USERHOME_MARKER in html


def extract_user_data(html: str) -> UserData:
    """Decodes the object passed to ``userhome(...)`` in the startup script."""

    _, found, script = html.partition(STARTUP_MARKER)
    if not found:
        raise ParseError("startup script block not found")

    _, found, call = script.partition(USERHOME_MARKER)
    if not found:
        raise ParseError("userhome() call not found in startup script")

    text = call.translate(_JSON_NOISE).lstrip()
    try:
        payload, end = _DECODER.raw_decode(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"userhome() argument is not valid JSON: {exc}") from exc

    if not text[end:].lstrip().startswith(")"):
        raise ParseError("userhome() call is not closed after its argument")

    try:
        return UserData.model_validate(payload)
    except ValidationError as exc:
        raise ParseError(f"userhome() argument is not a JSON object: {exc}") from exc

"""Exception hierarchy raised by the EduPage login flow."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .models.auth_models import LoginStage


class ErrorKind(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    HTTP = "http"
    INVALID_RESPONSE = "invalid_response"
    PARSE = "parse"
    SERIALIZATION = "serialization"


class EdupageError(Exception):
    """Base class for every failure surfaced by :class:`~edupage_login.session.Edupage`.

    ``kind`` identifies the failure without string matching, ``detail`` carries
    the underlying diagnostic message (if any) and ``stage`` records how far the
    login flow got before it failed.
    """

    kind: ErrorKind
    retryable = False

    def __init__(self, detail: Optional[str] = None, stage: Optional[LoginStage] = None) -> None:
        self.detail = detail
        self.stage = stage
        super().__init__(detail or self.kind.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, detail={self.detail!r})"


class InvalidCredentialsError(EdupageError):
    """The portal redirected back to the login form with the failure marker."""

    kind = ErrorKind.INVALID_CREDENTIALS


class HTTPError(EdupageError):
    """Transport failure: connection, HTTP status or unreadable body."""

    kind = ErrorKind.HTTP
    retryable = True


class InvalidResponseError(EdupageError):
    """The page did not carry the marker the flow expected at all."""

    kind = ErrorKind.INVALID_RESPONSE


class ParseError(EdupageError):
    """A marker was found but the structure around it was missing or malformed."""

    kind = ErrorKind.PARSE


class SerializationError(EdupageError):
    """Credentials could not be form-encoded; raised before any POST."""

    kind = ErrorKind.SERIALIZATION

"""Log in to an EduPage portal and recover the user payload it embeds."""

from .errors import (
    EdupageError,
    ErrorKind,
    HTTPError,
    InvalidCredentialsError,
    InvalidResponseError,
    ParseError,
    SerializationError,
)
from .models import UserData
from .session import Edupage

__all__ = [
    "Edupage",
    "UserData",
    "EdupageError",
    "ErrorKind",
    "HTTPError",
    "InvalidCredentialsError",
    "InvalidResponseError",
    "ParseError",
    "SerializationError",
]

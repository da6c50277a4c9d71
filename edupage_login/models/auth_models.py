"""Models used while logging in and the payload recovered afterwards."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict


class LoginStage(str, Enum):
    """Steps of the login handshake, in the order they are reached."""

    UNAUTHENTICATED = "unauthenticated"
    TOKEN_FETCHED = "token_fetched"
    CREDENTIALS_SUBMITTED = "credentials_submitted"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


class LoginCredentials(BaseModel):
    """Form fields posted to ``edubarLogin.php``."""

    model_config = ConfigDict(strict=True, frozen=True)

    username: str
    password: str
    csrfauth: str

    def to_form(self) -> str:
        return urlencode(self.model_dump(), encoding="utf-8")

    def __repr__(self) -> str:
        return f"LoginCredentials(username={self.username!r}, password='***', csrfauth='***')"

    __str__ = __repr__


class UserData(BaseModel):
    """The JSON object the portal passes to ``userhome(...)`` after login.

    The portal does not document or version this object, so every key is kept
    as-is instead of being mapped to declared fields.
    """

    model_config = ConfigDict(extra="allow")

    def get(self, key: str, default: Any = None) -> Any:
        return (self.model_extra or {}).get(key, default)

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump()

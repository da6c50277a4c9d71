"""Session object tying the HTTP client, login flow and auth state together."""

from __future__ import annotations

from typing import Optional

from .api.auth_api import AuthAPI
from .models import SessionState, UserData
from .utils.http_client import HttpClient


class Edupage:
    """One logged-in (or not yet logged-in) EduPage user.

    Each instance owns its own cookie jar; use one instance per concurrent
    login.
    """

    def __init__(self, http_client: Optional[HttpClient] = None, timeout: Optional[float] = None) -> None:
        self._client = http_client if http_client is not None else HttpClient(timeout=timeout)
        self._state = SessionState()

    @property
    def http_client(self) -> HttpClient:
        return self._client

    @property
    def logged_in(self) -> bool:
        return self._state.logged_in

    @property
    def user_data(self) -> Optional[UserData]:
        return self._state.user_data

    def is_authenticated(self) -> bool:
        return self._state.is_authenticated()

    def login(self, subdomain: str, username: str, password: str) -> UserData:
        """Runs the full handshake; state only changes if every step succeeds."""

        user_data = AuthAPI(self._client).login(subdomain, username, password)
        self._state.commit(user_data)
        return user_data

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Edupage":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

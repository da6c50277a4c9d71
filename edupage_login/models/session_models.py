"""Authentication state held by a session."""

from __future__ import annotations

from typing import Optional

from .auth_models import UserData


class SessionState:
    """Pairs the logged-in flag with the decoded user data.

    The flag is derived from the presence of the data, so the two can only
    change together through :meth:`commit`.
    """

    def __init__(self) -> None:
        self._user_data: Optional[UserData] = None

    @property
    def logged_in(self) -> bool:
        return self._user_data is not None

    @property
    def user_data(self) -> Optional[UserData]:
        return self._user_data

    def is_authenticated(self) -> bool:
        return self.logged_in

    def commit(self, user_data: UserData) -> None:
        if not isinstance(user_data, UserData):
            raise TypeError(f"expected UserData, got {type(user_data).__name__}")
        self._user_data = user_data

    def __repr__(self) -> str:
        return f"SessionState(logged_in={self.logged_in})"

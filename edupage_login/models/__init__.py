"""Data models for the login flow and session state."""

from .auth_models import LoginCredentials, LoginStage, UserData
from .session_models import SessionState

__all__ = ["LoginCredentials", "LoginStage", "UserData", "SessionState"]

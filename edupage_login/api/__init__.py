"""API layer for the portal login handshake."""

from .auth_api import AuthAPI

__all__ = ["AuthAPI"]

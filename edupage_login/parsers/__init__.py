"""Scrapers for the login form token and the post-login user payload."""

from .login_page import extract_csrf_token, extract_user_data, has_user_payload

__all__ = ["extract_csrf_token", "extract_user_data", "has_user_payload"]

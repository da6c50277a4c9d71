"""Utility helpers for HTTP and filesystem operations."""

from .http_client import HttpClient
from .file_utils import ensure_directory, save_user_data

__all__ = ["HttpClient", "ensure_directory", "save_user_data"]

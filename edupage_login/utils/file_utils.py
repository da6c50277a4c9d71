"""Filesystem helpers for writing the decoded login payload."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ..models import UserData


def ensure_directory(path: str) -> str:
    """Creates a directory (and its parents) if needed."""

    Path(path).mkdir(parents=True, exist_ok=True)
    return path


def save_user_data(path: str, user_data: UserData) -> str:
    """Writes ``user_data`` as pretty-printed UTF-8 JSON and returns the path."""

    parent = os.path.dirname(os.path.abspath(path))
    ensure_directory(parent)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(user_data.as_dict(), handle, ensure_ascii=False, indent=2)
    logging.info("Saved user data to %s", path)
    return path

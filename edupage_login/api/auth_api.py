"""Replays the EduPage browser login handshake."""

from __future__ import annotations

import logging
import re

import requests

from ..errors import (
    EdupageError,
    HTTPError,
    InvalidCredentialsError,
    InvalidResponseError,
    SerializationError,
)
from ..models import LoginCredentials, LoginStage, UserData
from ..parsers.login_page import extract_csrf_token, extract_user_data, has_user_payload
from ..utils.http_client import HttpClient, portal_url

LOGIN_PAGE_PATH = "login/index.php"
LOGIN_SUBMIT_PATH = "login/edubarLogin.php"
BAD_LOGIN_MARKER = "bad=1"

SUBDOMAIN_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?$")


class AuthAPI:
    """Runs GET login page -> scrape token -> POST credentials -> scrape payload.

    ``login`` never touches session state; it returns the decoded payload and
    leaves committing it to the caller.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client
        self.stage = LoginStage.UNAUTHENTICATED

    def login(self, subdomain: str, username: str, password: str) -> UserData:
        if not SUBDOMAIN_RE.match(subdomain or ""):
            raise ValueError(f"invalid EduPage subdomain: {subdomain!r}")

        self._advance(LoginStage.UNAUTHENTICATED)
        try:
            token = self._fetch_token(subdomain)
            self._advance(LoginStage.TOKEN_FETCHED)

            response = self._submit_credentials(subdomain, username, password, token)
            self._advance(LoginStage.CREDENTIALS_SUBMITTED)

            user_data = self._read_user_data(response)
        except EdupageError as exc:
            exc.stage = self.stage
            logging.debug("EduPage login for %s failed at %s: %r", subdomain, self.stage.value, exc)
            self._advance(LoginStage.FAILED)
            raise

        self._advance(LoginStage.AUTHENTICATED)
        logging.info("Logged in to %s as %s", subdomain, username)
        return user_data

    def _fetch_token(self, subdomain: str) -> str:
        url = portal_url(subdomain, LOGIN_PAGE_PATH)
        try:
            response = self._client.get_page(url)
            html = self._client.read_text(response)
        except (requests.RequestException, ValueError) as exc:
            raise HTTPError(str(exc)) from exc
        return extract_csrf_token(html)

    def _submit_credentials(self, subdomain: str, username: str, password: str, token: str) -> requests.Response:
        try:
            body = LoginCredentials(username=username, password=password, csrfauth=token).to_form()
        except (ValueError, TypeError) as exc:
            raise SerializationError(str(exc)) from exc

        url = portal_url(subdomain, LOGIN_SUBMIT_PATH)
        try:
            return self._client.post_form(url, body)
        except requests.RequestException as exc:
            raise HTTPError(str(exc)) from exc

    def _read_user_data(self, response: requests.Response) -> UserData:
        if BAD_LOGIN_MARKER in (response.url or ""):
            raise InvalidCredentialsError()

        try:
            html = self._client.read_text(response)
        except ValueError as exc:
            raise HTTPError(str(exc)) from exc

        if not has_user_payload(html):
            raise InvalidResponseError(
                f"login response from {response.url} has neither the user payload nor the {BAD_LOGIN_MARKER} marker"
            )
        return extract_user_data(html)

    def _advance(self, stage: LoginStage) -> None:
        logging.debug("Login stage: %s -> %s", self.stage.value, stage.value)
        self.stage = stage

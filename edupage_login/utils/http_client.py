"""Cookie-persistent HTTP helpers for talking to an EduPage portal."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

REAL_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/129.0.0.0 Safari/537.36"
)

PORTAL_DOMAIN = "edupage.org"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

PAGE_HEADERS: Dict[str, str] = {
    "user-agent": REAL_USER_AGENT,
    "accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "accept-language": "en-US,en;q=0.9",
}

TEXT_CONTENT_TYPES = ("text/", "application/xhtml+xml", "application/xml")


def portal_url(subdomain: str, path: str) -> str:
    return f"https://{subdomain}.{PORTAL_DOMAIN}/{path.lstrip('/')}"


class HttpClient:
    """Owns the ``requests.Session`` whose cookie jar carries the login.

    ``timeout`` is passed to every request; ``None`` keeps the transport
    default, which never times out.
    """

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None) -> None:
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(PAGE_HEADERS)

    @property
    def cookies(self) -> requests.cookies.RequestsCookieJar:
        return self._session.cookies

    def get_page(self, url: str) -> requests.Response:
        """GET an HTML page, raising for transport errors and server-side (5xx) statuses.

        Client-error pages are returned as-is; their body decides what went wrong.
        """

        try:
            response = self._session.get(url, timeout=self.timeout)
            if response.status_code >= 500:
                response.raise_for_status()
            return response
        except requests.RequestException as exc:
            logging.error("HTTP GET to %s failed: %s", url, exc)
            raise

    def post_form(self, url: str, body: str) -> requests.Response:
        """POST an already encoded form body, following redirects.

        The status code is left to the caller; the portal answers a rejected
        login with a normal redirect.
        """

        try:
            return self._session.post(
                url,
                data=body,
                headers={"Content-Type": FORM_CONTENT_TYPE},
                allow_redirects=True,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logging.error("HTTP POST to %s failed: %s", url, exc)
            raise

    @staticmethod
    def read_text(response: requests.Response) -> str:
        """Returns the decoded body, raising ``ValueError`` for non-text content."""

        content_type = response.headers.get("Content-Type", "")
        if content_type and not content_type.lower().startswith(TEXT_CONTENT_TYPES):
            raise ValueError(f"expected a text response from {response.url}, got {content_type}")
        try:
            return response.text
        except (requests.RequestException, LookupError, UnicodeDecodeError) as exc:
            raise ValueError(f"unable to decode response body from {response.url}: {exc}") from exc

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

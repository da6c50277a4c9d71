from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import pytest
import requests


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from edupage_login.utils.http_client import HttpClient  # noqa: E402


LOGIN_PAGE_HTML = """
<html>
  <body>
    <form method="post" action="/login/edubarLogin.php">
      <input type="hidden" name="csrfauth" value="ABC123">
      <input type="text" name="username">
      <input type="password" name="password">
    </form>
  </body>
</html>
"""

SUCCESS_HTML = """
<html>
  <head>
    <script type="text/javascript">
\t\t$j(document).ready(function() {
\t\t\tuserhome({"id":1,\r\n\t\t\t"name":"Jane"});
\t\t\tinitMenu();
\t\t});
    </script>
  </head>
  <body></body>
</html>
"""


def make_response(
    url: str,
    text: str = "",
    status: int = 200,
    content_type: str = "text/html; charset=utf-8",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = url
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    if content_type:
        response.headers["Content-Type"] = content_type
    return response


Queued = Union[requests.Response, Exception]


class FakeSession(requests.Session):
    """A ``requests.Session`` that replays queued responses instead of hitting the network."""

    def __init__(self) -> None:
        super().__init__()
        self.queued: Dict[str, List[Queued]] = {"GET": [], "POST": []}
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []
        self.closed = False

    def queue(self, method: str, item: Queued) -> None:
        self.queued[method].append(item)

    def request(self, method, url, *args, **kwargs):  # type: ignore[override]
        self.calls.append((method, url, kwargs))
        if not self.queued[method]:
            raise AssertionError(f"unexpected {method} {url}")
        item = self.queued[method].pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def methods(self) -> List[str]:
        return [method for method, _, _ in self.calls]

    def close(self) -> None:
        self.closed = True
        super().close()


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def http_client(fake_session: FakeSession) -> HttpClient:
    return HttpClient(session=fake_session)

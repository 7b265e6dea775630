# tests/helpers.py
from typing import Dict, List, Optional, Tuple

from headless.core.services.http_transport_service import HttpTransport
from headless.model import TransportResponse

BASE_URL = "http://localhost/"


def make_response(
        url: str,
        status: int = 200,
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
        method: str = "GET",
        reason: str = "",
) -> TransportResponse:
    return TransportResponse(
        url=url,
        method=method,
        status_code=status,
        reason=reason,
        headers=headers or {},
        content=body,
    )


class FakeTransport(HttpTransport):
    """
    In-memory transport. Responses are registered per (method, url) and served in order;
    the last registered response for a route keeps being served.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], List[dict]] = {}
        self.requests: List[dict] = []
        self.close_calls = 0
        self._cookies: Dict[str, str] = {}
        self._use_cookies = True

    def add(self, method: str, url: str, status: int = 200, body: bytes = b"",
            headers: Optional[Dict[str, str]] = None, reason: str = ""):
        self.routes.setdefault((method.upper(), url), []).append(
            {"status": status, "body": body, "headers": headers or {}, "reason": reason}
        )

    def send(self, method, url, data=None, headers=None) -> TransportResponse:
        method = method.upper()
        self.requests.append({"method": method, "url": url, "data": data, "headers": headers})
        queue = self.routes.get((method, url))
        if not queue:
            raise ConnectionError(f"No route registered for {method} {url}")
        route = queue.pop(0) if len(queue) > 1 else queue[0]
        return make_response(
            url, route["status"], route["body"], route["headers"], method=method, reason=route["reason"]
        )

    def close(self) -> None:
        self.close_calls += 1

    @property
    def cookies(self):
        return self._cookies

    @property
    def use_cookies(self) -> bool:
        return self._use_cookies

    @use_cookies.setter
    def use_cookies(self, value: bool) -> None:
        self._use_cookies = value

    def clear_cookies(self) -> None:
        self._cookies.clear()


FORM_PAGE = b"""<!DOCTYPE html>
<html>
<head><title>Form index</title></head>
<body>
<form id="edit" method="post">
  <input type="hidden" name="token" value="abc" />
  <input type="text" name="first" value="John" />
  <input name="untyped" value="plain" />
  <textarea name="notes">
Some notes</textarea>
  <input type="checkbox" name="subscribe" value="yes" checked />
  <input type="checkbox" name="spam" />
  <input type="radio" name="colour" value="red" checked />
  <input type="radio" name="colour" value="blue" />
  <select name="country">
    <option value="nl">Netherlands</option>
    <option value="au" selected>Australia</option>
  </select>
  <input type="text" name="disabled" value="x" disabled />
  <button type="submit" name="save" value="Save">Save</button>
  <input type="submit" name="cancel" value="Cancel" />
</form>
<a id="home" href="/home">Home</a>
<div id="outside"><span>Outside</span></div>
</body>
</html>
"""



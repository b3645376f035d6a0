# =============================================================================
# tests/helpers.py - Shared Test Helpers
# =============================================================================

from typing import Iterable
from urllib.parse import urlsplit

import requests
from fastapi.testclient import TestClient

BASE_URL = "http://testserver"


class BridgeSession:
    """``requests.Session`` stand‑in that forwards calls to a TestClient.

    Responses are converted into real ``requests.Response`` objects so
    that the client's error handling (``raise_for_status`` and
    ``requests.HTTPError``) runs unchanged.  Paths listed in
    ``unreachable`` raise ``requests.ConnectionError`` instead.
    """

    def __init__(self, client: TestClient, unreachable: Iterable[str] = ()) -> None:
        self.client = client
        self.unreachable = set(unreachable)
        self.calls = []

    def request(self, method, url, json=None, headers=None, timeout=None, **kwargs):
        path = urlsplit(url).path
        self.calls.append((method, path, json))
        if path in self.unreachable or "*" in self.unreachable:
            raise requests.ConnectionError(f"Connection refused: {url}")
        result = self.client.request(method, path, json=json, headers=headers)
        response = requests.Response()
        response.status_code = result.status_code
        response._content = result.content
        response.headers.update(result.headers)
        response.url = url
        response.reason = result.reason_phrase
        response.encoding = "utf-8"
        return response

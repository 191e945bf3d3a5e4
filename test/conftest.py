import json
import pytest
import requests


class DummyResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text

    def json(self):
        return json.loads(self.text)


@pytest.fixture
def registry_response(monkeypatch):
    """Serve ``body`` from every ``requests.get``; returns the list of calls made."""
    def respond(body, status=200):
        calls = []

        def get(url, timeout):
            calls.append({"url": url, "timeout": timeout})
            return DummyResponse(status, body)
        monkeypatch.setattr(requests, "get", get)
        return calls
    return respond

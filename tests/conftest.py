"""
Shared fakes: a Translate capability and an HTTP session. No network.
"""

import pytest


class FakeTranslator:
    def __init__(self, fail_on=(), on_call=None):
        self.calls = []
        self.fail_on = set(fail_on)
        self.on_call = on_call

    def translate(self, text, target_lang):
        self.calls.append((text, target_lang))
        if self.on_call is not None:
            self.on_call(text)
        if text in self.fail_on:
            raise RuntimeError(f"cannot translate {text!r}")
        return f"[{target_lang}] {text}"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    """Replays queued responses in order and records every request."""

    def __init__(self, responses=()):
        self.headers = {}
        self.requests = []
        self._responses = list(responses)

    def queue(self, response):
        self._responses.append(response)

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if not self._responses:
            return FakeResponse(200, {})
        return self._responses.pop(0)


@pytest.fixture
def translator():
    return FakeTranslator()


@pytest.fixture
def session():
    return FakeSession()

"""
Shared fixtures for Pronto provisioning SDK tests.
"""

import io
import json
from urllib import error

import pytest

from pronto_provisioning import ProntoConfiguration, ProntoEnvironment


class FakeHTTPResponse:
    """Stand-in for the object returned by ``urllib.request.urlopen``."""

    def __init__(self, raw: bytes, status: int = 200):
        self._raw = raw
        self.status = status

    def read(self):
        return self._raw

    def getcode(self):
        return self.status

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


@pytest.fixture
def test_config():
    """Staging configuration used across client tests."""
    return ProntoConfiguration(
        api_key="test_api_key_123",
        environment=ProntoEnvironment.STAGING,
        timeout_seconds=15.0,
    )


@pytest.fixture
def fake_urlopen(monkeypatch):
    """Patch ``urllib.request.urlopen`` to answer with a canned response.

    Usage:
        calls = fake_urlopen(200, {"issuer_data": ...})
        calls = fake_urlopen(500, b"")
        calls = fake_urlopen(raises=error.URLError("offline"))

    Non-2xx statuses are raised as ``HTTPError`` the way urllib does. Returns
    the list of ``(request, timeout)`` tuples seen by the fake.
    """

    def _install(status: int = 200, body=b"", *, raises: Exception | None = None):
        if isinstance(body, (dict, list)):
            raw = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            raw = body.encode("utf-8")
        else:
            raw = body
        calls = []

        def _urlopen(req, timeout=None):
            calls.append((req, timeout))
            if raises is not None:
                raise raises
            if not 200 <= status <= 299:
                raise error.HTTPError(
                    url=req.full_url,
                    code=status,
                    msg="error",
                    hdrs=None,
                    fp=io.BytesIO(raw),
                )
            return FakeHTTPResponse(raw, status)

        monkeypatch.setattr("urllib.request.urlopen", _urlopen)
        return calls

    return _install


@pytest.fixture
def issuer_data_payload():
    return {
        "issuer_data": "aXNzdWVyRGF0YQ==",
        "signature": "c2lnbmF0dXJl",
        "tag_id": 42,
    }


@pytest.fixture
def passes_payload():
    """Envelope with one fully populated pass and one without platform URLs."""
    return {
        "data": [
            {
                "id": "ref-001",
                "type": "pass",
                "attributes": {
                    "active": True,
                    "download_url": "https://example.com/pass.pkpass",
                    "download_url_apple": "https://example.com/apple.pkpass",
                    "download_url_google": "https://example.com/google",
                },
            },
            {
                "id": "ref-002",
                "type": "pass",
                "attributes": {
                    "active": False,
                    "download_url": "https://example.com/legacy.pkpass",
                    "download_url_apple": None,
                },
            },
        ]
    }

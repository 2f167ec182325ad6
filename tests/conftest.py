"""Shared fixtures: an isolated environment and a fake HTTP session."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any

import pytest

import naba.services.transport as transport_module


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png-data"


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def image_response(*payloads: bytes, mime_type: str = "image/png") -> dict:
    """A 200 body with one candidate holding one inline image per payload."""
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [{"inlineData": {"mimeType": mime_type, "data": b64(p)}} for p in payloads],
                },
                "finishReason": "STOP",
            }
        ]
    }


@dataclass
class FakeResponse:
    status_code: int
    content: bytes


@dataclass
class RecordedRequest:
    url: str
    headers: dict
    json: dict
    timeout: Any


@dataclass
class FakeApi:
    """Stands in for curl_cffi's Session; replies from a queue of responses."""

    responses: list[FakeResponse] = field(default_factory=list)
    requests: list[RecordedRequest] = field(default_factory=list)
    error: Exception | None = None
    sessions_opened: int = 0
    sessions_closed: int = 0
    repeat_last: bool = True

    def reply(self, body: Any, status_code: int = 200) -> "FakeApi":
        content = body if isinstance(body, bytes) else json.dumps(body).encode()
        self.responses.append(FakeResponse(status_code, content))
        return self

    def raise_error(self, error: Exception) -> "FakeApi":
        self.error = error
        return self

    # Session protocol

    def __call__(self) -> "FakeApi":
        self.sessions_opened += 1
        return self

    def __enter__(self) -> "FakeApi":
        return self

    def __exit__(self, *exc) -> None:
        self.sessions_closed += 1

    def post(self, url: str, headers: dict, json: dict, timeout: Any) -> FakeResponse:
        self.requests.append(RecordedRequest(url, headers, json, timeout))
        if self.error is not None:
            raise self.error
        if len(self.responses) > 1 or not self.repeat_last:
            return self.responses.pop(0)
        return self.responses[0]


@pytest.fixture
def fake_api(monkeypatch) -> FakeApi:
    """Route every transport session through a :class:`FakeApi`."""
    api = FakeApi()
    monkeypatch.setattr(transport_module, "Session", api)
    return api


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run from an empty directory with a private config dir and a test API key."""
    config_dir = tmp_path / "config"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NABA_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    for name in ("GEMINI_BASE_URL", "GEMINI_MODEL", "LOG_LEVEL", "TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path

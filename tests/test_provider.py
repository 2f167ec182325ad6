"""Tests for the transport and the provider pipeline."""

import base64

import pytest
from curl_cffi.requests.exceptions import RequestException, Timeout

from conftest import PNG_BYTES, image_response
from naba.config import DEFAULT_BASE_URL, Settings
from naba.errors import ApiError, ExitCode, TransportError
from naba.services.builder import build_text_request
from naba.services.provider import GeminiImageProvider
from naba.services.transport import GeminiTransport


def make_provider(api, base_url: str = "http://mock.local/v1beta") -> GeminiImageProvider:
    return GeminiImageProvider(
        GeminiTransport("test-key", "test-model", base_url=base_url, session_factory=api)
    )


class TestTransport:
    def test_posts_to_generate_content(self, fake_api):
        fake_api.reply(image_response(PNG_BYTES))
        transport = GeminiTransport("test-key", "test-model", base_url="http://mock.local/v1beta/")

        status, body = transport.send(build_text_request("a red apple"))

        assert status == 200
        assert b"candidates" in body
        request = fake_api.requests[0]
        assert request.url == "http://mock.local/v1beta/models/test-model:generateContent"
        assert request.headers["x-goog-api-key"] == "test-key"
        assert request.headers["Content-Type"] == "application/json"
        assert request.timeout == 120
        assert request.json["contents"][0]["parts"] == [{"text": "a red apple"}]
        assert request.json["generationConfig"] == {"responseModalities": ["TEXT", "IMAGE"]}

    def test_default_base_url(self):
        assert GeminiTransport("k", "m").url == f"{DEFAULT_BASE_URL}/models/m:generateContent"

    def test_session_released_on_success_and_failure(self, fake_api):
        fake_api.reply({}, status_code=500)
        transport = GeminiTransport("k", "m")
        transport.send(build_text_request("x"))

        fake_api.raise_error(RequestException("connection refused"))
        with pytest.raises(TransportError):
            transport.send(build_text_request("x"))

        assert fake_api.sessions_opened == 2
        assert fake_api.sessions_closed == 2

    def test_timeout_is_transport_error(self, fake_api):
        fake_api.raise_error(Timeout("operation timed out"))

        with pytest.raises(TransportError, match="timed out"):
            GeminiTransport("k", "m", timeout=5).send(build_text_request("x"))


class TestProvider:
    def test_generate(self, fake_api):
        fake_api.reply(image_response(PNG_BYTES))

        images = make_provider(fake_api).generate("a red apple")

        assert len(images) == 1
        assert images[0].data == PNG_BYTES
        assert images[0].mime_type == "image/png"

    def test_generate_with_image(self, fake_api, tmp_path):
        source = tmp_path / "test.webp"
        source.write_bytes(b"test-image")
        fake_api.reply(image_response(b"edited-image"))

        images = make_provider(fake_api).generate_with_image("make it blue", source)

        assert images[0].data == b"edited-image"
        parts = fake_api.requests[0].json["contents"][0]["parts"]
        assert parts[0] == {"text": "make it blue"}
        assert parts[1]["inlineData"]["mimeType"] == "image/webp"
        assert base64.b64decode(parts[1]["inlineData"]["data"]) == b"test-image"

    def test_missing_input_image_never_calls_api(self, fake_api, tmp_path):
        with pytest.raises(ApiError) as exc_info:
            make_provider(fake_api).generate_with_image("x", tmp_path / "missing.png")

        assert exc_info.value.exit_code == ExitCode.FILE_IO
        assert fake_api.requests == []

    def test_transport_failure_is_general_error(self, fake_api):
        fake_api.raise_error(RequestException("connection refused"))

        with pytest.raises(ApiError) as exc_info:
            make_provider(fake_api).generate("x")

        assert exc_info.value.exit_code == ExitCode.GENERAL
        assert exc_info.value.status_code == 0
        assert "api request failed" in exc_info.value.message

    @pytest.mark.parametrize(
        "status,exit_code",
        [(401, ExitCode.AUTH), (403, ExitCode.AUTH), (429, ExitCode.RATE_LIMIT), (500, ExitCode.API)],
    )
    def test_http_errors(self, fake_api, status, exit_code):
        fake_api.reply({"error": {"code": status, "message": "nope", "status": "X"}}, status_code=status)

        with pytest.raises(ApiError) as exc_info:
            make_provider(fake_api).generate("x")

        assert exc_info.value.exit_code == exit_code
        assert exc_info.value.status_code == status

    def test_blocked_prompt(self, fake_api):
        fake_api.reply({"candidates": [], "promptFeedback": {"blockReason": "SAFETY"}})

        with pytest.raises(ApiError, match="prompt blocked: SAFETY"):
            make_provider(fake_api).generate("x")

    def test_no_retry(self, fake_api):
        fake_api.reply({}, status_code=503)

        with pytest.raises(ApiError):
            make_provider(fake_api).generate("x")

        assert len(fake_api.requests) == 1

    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("GEMINI_BASE_URL", "http://localhost:9999")
        monkeypatch.setenv("TIMEOUT", "30")

        provider = GeminiImageProvider.from_settings(Settings(), "key", "custom-model")

        assert provider.model == "custom-model"
        assert provider.transport.url == "http://localhost:9999/models/custom-model:generateContent"
        assert provider.transport.timeout == 30

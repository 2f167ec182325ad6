"""Gemini provider: one request/response round trip per call."""

from pathlib import Path

from loguru import logger

from naba.config import Settings
from naba.errors import ApiError, ExitCode, TransportError
from naba.models.request import GenerateContentRequest
from naba.models.response import ImageResult
from naba.services.builder import build_image_request, build_text_request, read_image_file
from naba.services.classifier import classify
from naba.services.extractor import extract_images
from naba.services.transport import GeminiTransport


class GeminiImageProvider:
    """Runs the build -> send -> classify -> extract pipeline.

    No call is retried; every failure is raised as :class:`ApiError` with its
    exit code attached.
    """

    def __init__(self, transport: GeminiTransport):
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, api_key: str, model: str) -> "GeminiImageProvider":
        return cls(
            GeminiTransport(
                api_key=api_key,
                model=model,
                base_url=settings.gemini_base_url,
                timeout=settings.timeout,
            )
        )

    @property
    def model(self) -> str:
        return self.transport.model

    def generate(self, prompt: str) -> list[ImageResult]:
        """Generate images from a text prompt."""
        return self._run(build_text_request(prompt))

    def generate_with_image(self, prompt: str, image_path: str | Path) -> list[ImageResult]:
        """Generate images from a text prompt and an input image file."""
        image, mime_type = read_image_file(image_path)
        logger.debug(f"Loaded input image {image_path} ({mime_type}, {len(image)} bytes)")
        return self._run(build_image_request(prompt, image, mime_type))

    def _run(self, request: GenerateContentRequest) -> list[ImageResult]:
        try:
            status_code, body = self.transport.send(request)
        except TransportError as e:
            raise ApiError(f"api request failed: {e}", ExitCode.GENERAL) from e

        response = classify(status_code, body)
        return extract_images(response)

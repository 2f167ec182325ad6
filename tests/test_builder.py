"""Tests for naba.services.builder."""

import base64

import pytest

from naba.errors import ApiError, ExitCode
from naba.services.builder import (
    build_image_request,
    build_text_request,
    detect_mime_type,
    read_image_file,
)


class TestBuildRequests:
    def test_text_request_has_one_user_text_part(self):
        request = build_text_request("a red apple")

        assert len(request.contents) == 1
        content = request.contents[0]
        assert content.role == "user"
        assert len(content.parts) == 1
        assert content.parts[0].text == "a red apple"
        assert content.parts[0].inlineData is None

    def test_image_request_puts_text_before_image(self):
        request = build_image_request("make it blue", b"image-bytes", "image/jpeg")

        parts = request.contents[0].parts
        assert len(parts) == 2
        assert parts[0].text == "make it blue"
        assert parts[1].inlineData.mimeType == "image/jpeg"
        assert base64.b64decode(parts[1].inlineData.data) == b"image-bytes"

    def test_both_modalities_requested(self):
        for request in (build_text_request("x"), build_image_request("x", b"y", "image/png")):
            assert request.generationConfig.responseModalities == ["TEXT", "IMAGE"]

    def test_wire_format(self):
        """Serialized body matches the generateContent JSON layout."""
        body = build_image_request("edit", b"abc", "image/png").model_dump(exclude_none=True)

        assert body == {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": "edit"},
                        {"inlineData": {"mimeType": "image/png", "data": "YWJj"}},
                    ],
                }
            ],
            "generationConfig": {"responseModalities": ["TEXT", "IMAGE"]},
        }


class TestReadImageFile:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("image.png", "image/png"),
            ("image.PNG", "image/png"),
            ("image.jpg", "image/jpeg"),
            ("image.jpeg", "image/jpeg"),
            ("image.gif", "image/gif"),
            ("image.webp", "image/webp"),
            ("image.bmp", "image/bmp"),
            ("image.unknown", "image/png"),
            ("no-extension", "image/png"),
        ],
    )
    def test_detect_mime_type(self, name, expected):
        assert detect_mime_type(name) == expected

    def test_reads_bytes_and_mime_type(self, tmp_path):
        path = tmp_path / "photo.jpg"
        path.write_bytes(b"jpeg-bytes")

        data, mime_type = read_image_file(path)

        assert data == b"jpeg-bytes"
        assert mime_type == "image/jpeg"

    def test_missing_file_is_file_io_error(self, tmp_path):
        with pytest.raises(ApiError) as exc_info:
            read_image_file(tmp_path / "missing.png")

        assert exc_info.value.exit_code == ExitCode.FILE_IO
        assert exc_info.value.status_code == 0
        assert "read image file" in exc_info.value.message

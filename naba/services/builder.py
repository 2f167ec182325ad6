"""Request assembly for the generateContent endpoint."""

import base64
from pathlib import Path

from naba.errors import ApiError, ExitCode
from naba.models.request import Content, GenerateContentRequest, GenerationConfig, InlineData, Part


RESPONSE_MODALITIES = ["TEXT", "IMAGE"]

_MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".bmp": "image/bmp",
}


def _build_request(parts: list[Part]) -> GenerateContentRequest:
    return GenerateContentRequest(
        contents=[Content(role="user", parts=parts)],
        generationConfig=GenerationConfig(responseModalities=list(RESPONSE_MODALITIES)),
    )


def build_text_request(prompt: str) -> GenerateContentRequest:
    """Build a single-turn request carrying only a text prompt."""
    return _build_request([Part(text=prompt)])


def build_image_request(prompt: str, image: bytes, mime_type: str) -> GenerateContentRequest:
    """Build a single-turn request: the text prompt followed by one inline image."""
    return _build_request(
        [
            Part(text=prompt),
            Part(
                inlineData=InlineData(
                    mimeType=mime_type,
                    data=base64.b64encode(image).decode("ascii"),
                )
            ),
        ]
    )


def detect_mime_type(path: str | Path) -> str:
    """Guess an image MIME type from the file extension, defaulting to PNG."""
    return _MIME_TYPES.get(Path(path).suffix.lower(), "image/png")


def read_image_file(path: str | Path) -> tuple[bytes, str]:
    """Load an input image for edit/restore requests.

    Returns:
        Tuple of (image_bytes, mime_type)

    Raises:
        ApiError: with ``ExitCode.FILE_IO`` when the file cannot be read
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ApiError(f"read image file '{path}': {e}", ExitCode.FILE_IO) from e
    return data, detect_mime_type(path)

"""Collect decoded images from a generateContent response."""

import base64
import binascii

from loguru import logger

from naba.errors import ApiError, ExitCode
from naba.models.response import GenerateContentResponse, ImageResult


def extract_images(response: GenerateContentResponse) -> list[ImageResult]:
    """
    Decode every inline-data part, in candidate order then part order.

    Candidates without content and text-only parts are skipped.

    Raises:
        ApiError: if a payload is not valid base64, or no image was found
    """
    images: list[ImageResult] = []
    text_parts = 0

    for candidate in response.candidates:
        if candidate.content is None:
            continue
        for part in candidate.content.parts:
            if part.inlineData is None:
                if part.text:
                    text_parts += 1
                continue
            try:
                payload = part.inlineData.data.replace("\r", "").replace("\n", "")
                data = base64.b64decode(payload, validate=True)
            except (binascii.Error, ValueError) as e:
                raise ApiError(f"decode image data: {e}", ExitCode.API) from e
            images.append(ImageResult(data=data, mime_type=part.inlineData.mimeType))

    if not images:
        logger.warning(f"Request succeeded but no images in response ({text_parts} text parts)")
        raise ApiError("no images in response", ExitCode.API)

    logger.debug(f"Extracted {len(images)} image(s)")
    return images

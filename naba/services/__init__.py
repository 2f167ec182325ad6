"""Services for the application."""

from .provider import GeminiImageProvider
from .transport import GeminiTransport
from .writer import write_image

__all__ = [
    "GeminiImageProvider",
    "GeminiTransport",
    "write_image",
]

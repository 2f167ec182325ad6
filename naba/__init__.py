"""naba - image generation CLI backed by the Gemini generateContent API."""

__version__ = "0.1.0"

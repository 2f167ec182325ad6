"""Data models for the application."""

from .request import GenerateContentRequest, Content, Part, InlineData, GenerationConfig
from .response import (
    GenerateContentResponse,
    Candidate,
    PromptFeedback,
    SafetyRating,
    ErrorResponse,
    ErrorDetail,
    ImageResult,
    Result,
)

__all__ = [
    "GenerateContentRequest",
    "Content",
    "Part",
    "InlineData",
    "GenerationConfig",
    "GenerateContentResponse",
    "Candidate",
    "PromptFeedback",
    "SafetyRating",
    "ErrorResponse",
    "ErrorDetail",
    "ImageResult",
    "Result",
]

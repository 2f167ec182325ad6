"""Response models for the Gemini generateContent API and local results."""

import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from .request import Content, null_as_empty_list


class SafetyRating(BaseModel):
    """Safety rating attached to a candidate or to prompt feedback."""

    category: str = Field(default="", description="Harm category")
    probability: str = Field(default="", description="Harm probability")


class Candidate(BaseModel):
    """Candidate response from the model."""

    content: Content | None = Field(default=None, description="Content of the candidate")
    finishReason: str | None = Field(default=None, description="Reason for finishing")
    safetyRatings: list[SafetyRating] = Field(default_factory=list, description="Safety ratings")

    @field_validator("safetyRatings", mode="before")
    @classmethod
    def ratings_not_null(cls, value: Any) -> Any:
        return null_as_empty_list(value)


class PromptFeedback(BaseModel):
    """Feedback about the prompt, set when the request was refused."""

    blockReason: str | None = Field(default=None, description="Reason the prompt was blocked")
    safetyRatings: list[SafetyRating] = Field(default_factory=list, description="Safety ratings")

    @field_validator("safetyRatings", mode="before")
    @classmethod
    def ratings_not_null(cls, value: Any) -> Any:
        return null_as_empty_list(value)


class GenerateContentResponse(BaseModel):
    """Response model for the generateContent endpoint."""

    candidates: list[Candidate] = Field(default_factory=list, description="Candidates from generation")
    promptFeedback: PromptFeedback | None = Field(default=None, description="Prompt feedback")

    @field_validator("candidates", mode="before")
    @classmethod
    def candidates_not_null(cls, value: Any) -> Any:
        return null_as_empty_list(value)

    @property
    def block_reason(self) -> str:
        if self.promptFeedback is None:
            return ""
        return self.promptFeedback.blockReason or ""


class ErrorDetail(BaseModel):
    """Error detail in response."""

    code: int = Field(default=0, description="Error code")
    message: str = Field(default="", description="Error message")
    status: str = Field(default="", description="Error status")


class ErrorResponse(BaseModel):
    """Error envelope returned with non-200 statuses."""

    error: ErrorDetail = Field(default_factory=ErrorDetail, description="Error details")


class ImageResult(BaseModel):
    """A decoded image taken from a response."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    mime_type: str


class Result(BaseModel):
    """Metadata about one written image, used for reporting."""

    path: str
    command: str
    prompt: str
    elapsed_ms: int
    params: dict[str, Any] | None = None

    @classmethod
    def new(cls, path: str, command: str, prompt: str, start: float) -> "Result":
        """Build a result whose elapsed time runs from ``start`` (a ``time.monotonic()`` value)."""
        return cls(
            path=path,
            command=command,
            prompt=prompt,
            elapsed_ms=int((time.monotonic() - start) * 1000),
        )

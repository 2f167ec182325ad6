"""Request models for the Gemini generateContent API."""

from typing import Any, Literal
from pydantic import BaseModel, Field, field_validator


def null_as_empty_list(value: Any) -> Any:
    """The API may send ``null`` where a list is expected."""
    return [] if value is None else value


class InlineData(BaseModel):
    """Inline binary payload carried inside a part."""

    mimeType: str = Field(default="", description="MIME type of the data")
    data: str = Field(default="", description="Base64 encoded data")


class Part(BaseModel):
    """Part of content, either text or inline data."""

    text: str | None = Field(default=None, description="Text content")
    inlineData: InlineData | None = Field(default=None, description="Inline data")


class Content(BaseModel):
    """One conversational turn: a role and its ordered parts."""

    role: Literal["user", "model"] = Field(default="user", description="Role of the content")
    parts: list[Part] = Field(default_factory=list, description="Parts of the content")

    @field_validator("parts", mode="before")
    @classmethod
    def parts_not_null(cls, value: Any) -> Any:
        return null_as_empty_list(value)


class GenerationConfig(BaseModel):
    """Generation configuration."""

    responseModalities: list[str] = Field(
        default=["TEXT", "IMAGE"], description="Response modalities"
    )


class GenerateContentRequest(BaseModel):
    """Request model for the generateContent endpoint."""

    contents: list[Content] = Field(..., min_length=1, description="Contents to generate from")
    generationConfig: GenerationConfig = Field(
        default_factory=GenerationConfig, description="Generation configuration"
    )

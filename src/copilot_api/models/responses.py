"""
API response models for copilot-api.

Raw models mirror what the chat endpoint returns and are validated
leniently. ``NormalizedResponse`` is the stable shape handed to callers.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict


class Usage(BaseModel):
    """
    Token usage information as returned by the API.
    """

    model_config = ConfigDict(extra="allow")

    prompt_tokens: Optional[int] = Field(None, ge=0)
    completion_tokens: Optional[int] = Field(None, ge=0)
    total_tokens: Optional[int] = Field(None, ge=0)


class ChoiceMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: Optional[str] = None
    content: Optional[str] = None


class Choice(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: int = 0
    message: ChoiceMessage
    finish_reason: Optional[str] = None


class RawResponse(BaseModel):
    """
    Chat completion response as returned by the API.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = Field(None, description="Unique identifier for the completion")
    model: Optional[str] = Field(None, description="Model used for completion")
    choices: List[Choice] = Field(default_factory=list)
    usage: Optional[Usage] = None


class NormalizedUsage(BaseModel):
    """
    Token usage in the public camelCase shape.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    prompt_tokens: Optional[int] = Field(None, alias="promptTokens")
    completion_tokens: Optional[int] = Field(None, alias="completionTokens")
    total_tokens: Optional[int] = Field(None, alias="totalTokens")


class NormalizedResponse(BaseModel):
    """
    Stable response shape returned to callers.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    content: str = Field(..., description="The model's response text")
    model: Optional[str] = Field(None, description="The model used")
    id: Optional[str] = Field(None, description="Response ID")
    usage: Optional[NormalizedUsage] = Field(None, description="Token usage information")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys; absent fields are left out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ModelOption(BaseModel):
    """
    A selectable chat model.
    """

    model_config = ConfigDict(extra="forbid")

    label: str = Field(..., description="Human-readable model name", min_length=1)
    value: str = Field(..., description="Model identifier sent to the API", min_length=1)

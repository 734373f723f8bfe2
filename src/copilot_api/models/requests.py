"""
API request models for copilot-api.

This module contains the call options accepted from host plugins and the
wire payload sent to the chat completion endpoint.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, ConfigDict


class ChatMessage(BaseModel):
    """
    Individual chat message in a conversation.
    """

    model_config = ConfigDict(extra="ignore")

    role: Literal["user", "assistant", "system"] = Field(
        ..., description="Role of the message sender"
    )
    content: str = Field(..., description="Message text")


class CallOptions(BaseModel):
    """
    Options for a single wrapped call.

    Accepts both snake_case names and the camelCase names used by
    JavaScript callers (``topP``, ``systemPrompt``, ``messageHistory``).
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    prompt: str = Field(..., description="The message to send to the model")
    model: Optional[str] = Field(
        None, description="Model to use (defaults to current selected model)"
    )
    temperature: float = Field(
        0, description="Temperature for response randomness", ge=0.0, le=1.0
    )
    top_p: float = Field(
        1, alias="topP", description="Nucleus sampling parameter", ge=0.0, le=1.0
    )
    system_prompt: Optional[str] = Field(
        None, alias="systemPrompt", description="System prompt to set context"
    )
    message_history: List[ChatMessage] = Field(
        default_factory=list,
        alias="messageHistory",
        description="Prior conversation, oldest first",
    )


class RequestPayload(BaseModel):
    """
    Wire-format request for the chat completion endpoint.

    ``n``, ``stream`` and ``intent`` are fixed: a call never asks for more
    than one completion or for a streamed response.
    """

    model_config = ConfigDict(extra="forbid")

    model: str = Field(..., description="Model identifier", min_length=1)
    temperature: float = Field(0, ge=0.0, le=1.0)
    top_p: float = Field(1, ge=0.0, le=1.0)
    n: Literal[1] = 1
    stream: Literal[False] = False
    intent: Literal[False] = False
    messages: List[ChatMessage] = Field(..., min_length=1)

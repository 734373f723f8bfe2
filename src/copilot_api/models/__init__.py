"""
copilot-api data models.

This module provides all Pydantic models for credentials, requests and responses.
"""

from __future__ import annotations

# Authentication models
from .auth import (
    AccessToken,
    Credentials,
    TokenResponse,
)

# Request models
from .requests import (
    ChatMessage,
    CallOptions,
    RequestPayload,
)

# Response models
from .responses import (
    Usage,
    ChoiceMessage,
    Choice,
    RawResponse,
    NormalizedUsage,
    NormalizedResponse,
    ModelOption,
)

__all__ = [
    # Authentication models
    "AccessToken",
    "Credentials",
    "TokenResponse",
    # Request models
    "ChatMessage",
    "CallOptions",
    "RequestPayload",
    # Response models
    "Usage",
    "ChoiceMessage",
    "Choice",
    "RawResponse",
    "NormalizedUsage",
    "NormalizedResponse",
    "ModelOption",
]

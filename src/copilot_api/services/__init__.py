"""
Service modules for copilot-api.

This package contains request building, response normalization, the model
catalogue and the chat dispatch.
"""

from __future__ import annotations

from .chat_client import send_message
from .model_manager import DEFAULT_MODELS, ModelManager
from .request_builder import build_messages, build_request
from .response_normalizer import normalize_response

__all__ = [
    # Chat dispatch
    "send_message",
    # Model management
    "DEFAULT_MODELS",
    "ModelManager",
    # Request / response translation
    "build_messages",
    "build_request",
    "normalize_response",
]

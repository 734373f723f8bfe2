"""
copilot-api - Programmatic access to GitHub Copilot chat models.

This package provides an async client that keeps a Copilot access token
fresh, builds chat completion requests and normalizes the responses for
host application plugins.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Programmatic access to GitHub Copilot chat models"

# Core exports
from .core import get_settings, get_logger
from .api import CopilotAPI
from .auth import FileCredentialStore, InMemoryCredentialStore
from .models import CallOptions, ChatMessage, Credentials, ModelOption, NormalizedResponse

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "get_settings",
    "get_logger",
    "CopilotAPI",
    "FileCredentialStore",
    "InMemoryCredentialStore",
    "CallOptions",
    "ChatMessage",
    "Credentials",
    "ModelOption",
    "NormalizedResponse",
]

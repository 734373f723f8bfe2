"""
Utility modules for copilot-api.

This package contains the shared HTTP client used by the default
token exchange and chat dispatch collaborators.
"""

from __future__ import annotations

from .http_client import HTTPClient, CopilotHTTPClient

__all__ = [
    "HTTPClient",
    "CopilotHTTPClient",
]

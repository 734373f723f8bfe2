"""
Authentication modules for copilot-api.

This package contains credential storage, the personal token exchange and
the access token lifecycle.
"""

from __future__ import annotations

from .credentials import CredentialStore, InMemoryCredentialStore, FileCredentialStore
from .token_exchange import fetch_token
from .token_manager import TokenManager

__all__ = [
    # Credential storage
    "CredentialStore",
    "InMemoryCredentialStore",
    "FileCredentialStore",
    # Token exchange
    "fetch_token",
    # Token management
    "TokenManager",
]

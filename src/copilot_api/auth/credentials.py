"""
Credential storage for copilot-api.

The token manager only ever calls ``get_credentials`` and
``store_credentials`` on a store, keyed by the host context. Hosts with
their own secure storage implement the ``CredentialStore`` protocol; the
in-memory and JSON file stores here cover tests and standalone use.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from ..core import get_logger, get_settings, log_auth_event
from ..models import Credentials


@runtime_checkable
class CredentialStore(Protocol):
    """Secure key-value store holding credentials per host context."""

    async def get_credentials(self, context: str) -> Optional[Credentials]:
        ...

    async def store_credentials(self, credentials: Credentials, context: str) -> None:
        ...


class InMemoryCredentialStore:
    """Process-local store, keyed by context."""

    def __init__(self, initial: Optional[Dict[str, Credentials]] = None):
        self._credentials: Dict[str, Credentials] = dict(initial or {})

    async def get_credentials(self, context: str) -> Optional[Credentials]:
        return self._credentials.get(context)

    async def store_credentials(self, credentials: Credentials, context: str) -> None:
        self._credentials[context] = credentials


class FileCredentialStore:
    """Credentials persisted as a JSON document keyed by context."""

    def __init__(self, storage_path: Optional[Path] = None):
        self.logger = get_logger(__name__)

        if storage_path is None:
            storage_path = get_settings().data_dir / "credentials.json"
        self.storage_path = Path(storage_path)

    async def get_credentials(self, context: str) -> Optional[Credentials]:
        """
        Load credentials for a context.

        Args:
            context: Host context key

        Returns:
            Stored credentials, or None if nothing is stored for the context
        """
        data = self._load_from_disk()
        entry = data.get(context)
        if entry is None:
            return None
        return Credentials.model_validate(entry)

    async def store_credentials(self, credentials: Credentials, context: str) -> None:
        """
        Persist credentials for a context, leaving other contexts untouched.

        Args:
            credentials: Credentials to store
            context: Host context key
        """
        data = self._load_from_disk()
        data[context] = credentials.to_store()
        self._save_to_disk(data)

        log_auth_event(self.logger, "credentials_stored", context=context, success=True)

    def _load_from_disk(self) -> Dict[str, Any]:
        """Read the whole store; a missing file is an empty store."""
        if not self.storage_path.exists():
            return {}

        with open(self.storage_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Credential file {self.storage_path} is not a JSON object")
        return data

    def _save_to_disk(self, data: Dict[str, Any]) -> None:
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.storage_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        # Set restrictive permissions
        self.storage_path.chmod(0o600)

"""
Token management for copilot-api.

This module keeps the short-lived access token usable: it detects expiry,
exchanges the personal token for a fresh access token and persists the
result back into the credential store.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from ..core import (
    get_logger,
    get_settings,
    Settings,
    AuthenticationError,
    log_auth_event,
    log_error,
)
from ..models import Credentials, TokenResponse
from .credentials import CredentialStore
from .token_exchange import fetch_token as default_fetch_token


FetchToken = Callable[[str], Awaitable[Union[TokenResponse, Mapping[str, Any]]]]


class TokenManager:
    """Manages the access token of one host context."""

    def __init__(
        self,
        credential_store: CredentialStore,
        context: Optional[str] = None,
        fetch_token: Optional[FetchToken] = None,
        clock: Callable[[], float] = time.time,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.logger = get_logger(__name__)

        self.credential_store = credential_store
        self.context = context or self.settings.auth.context
        self._fetch_token = fetch_token or self._default_fetch_token
        self._clock = clock

    async def _default_fetch_token(self, pat: str) -> TokenResponse:
        return await default_fetch_token(pat, settings=self.settings)

    @property
    def refresh_margin_ms(self) -> int:
        return self.settings.auth.refresh_margin * 1000

    def _now_ms(self) -> float:
        return self._clock() * 1000

    async def get_access_token(self) -> str:
        """
        Get a usable access token, refreshing it if needed.

        The cached token is reused unless it is missing or expires within
        the refresh margin. Errors from the token exchange propagate as-is.

        Returns:
            Access token string

        Raises:
            AuthenticationError: If no personal access token is stored
        """
        credentials = await self.credential_store.get_credentials(self.context)

        if credentials is None or not credentials.pat:
            raise AuthenticationError()

        access_token = credentials.access_token
        expires_at = access_token.expires_at if access_token else 0
        expires_at_ms = (expires_at or 0) * 1000

        missing = access_token is None or not access_token.token
        if missing or self._now_ms() >= expires_at_ms - self.refresh_margin_ms:
            return await self._refresh(credentials)

        return access_token.token

    async def _refresh(self, credentials: Credentials) -> str:
        """Exchange the personal token and persist the new access token."""
        self.logger.info("Refreshing access token", context=self.context)

        try:
            result = await self._fetch_token(credentials.pat)
        except Exception as e:
            log_auth_event(
                self.logger,
                "access_token_refresh",
                context=self.context,
                success=False,
                details={"error": str(e)},
            )
            raise

        token_response = TokenResponse.model_validate(result)
        updated = credentials.with_access_token(token_response.to_access_token())
        await self.credential_store.store_credentials(updated, self.context)

        log_auth_event(
            self.logger,
            "access_token_refresh",
            context=self.context,
            success=True,
            details={"expires_at": token_response.expires_at},
        )

        return token_response.token

    async def is_authenticated(self) -> bool:
        """
        Check whether the stored session is currently usable.

        Uses the exact expiry without the refresh margin, so a token
        reported as authenticated may still be refreshed on the next call.
        Never raises.

        Returns:
            True if a personal token and an unexpired access token are stored
        """
        try:
            credentials = await self.credential_store.get_credentials(self.context)

            if credentials is None or not credentials.pat:
                return False
            if credentials.access_token is None or not credentials.access_token.token:
                return False

            expires_at_ms = (credentials.access_token.expires_at or 0) * 1000
            return self._now_ms() < expires_at_ms

        except Exception as e:
            log_error(self.logger, e, context={"operation": "is_authenticated"})
            return False

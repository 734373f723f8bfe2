"""
Personal token exchange for copilot-api.

Trades a long-lived personal access token for a short-lived Copilot
access token.
"""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import ValidationError

from ..core import (
    get_logger,
    get_settings,
    Settings,
    CopilotAPIError,
    TokenRefreshError,
    log_auth_event,
)
from ..models import TokenResponse
from ..utils.http_client import CopilotHTTPClient


logger = get_logger(__name__)


async def fetch_token(
    pat: str,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> TokenResponse:
    """
    Exchange a personal access token for an access token.

    Args:
        pat: Personal access token
        settings: Settings to use instead of the global ones
        transport: Optional httpx transport, mainly for tests

    Returns:
        The new token and its expiry (unix seconds)

    Raises:
        TokenRefreshError: If the exchange is rejected or cannot be completed
    """
    settings = settings or get_settings()
    token_url = settings.auth.token_url

    async with CopilotHTTPClient(settings=settings, transport=transport) as http:
        try:
            response = await http.get(
                token_url,
                headers={"Authorization": f"token {pat}"},
            )
        except CopilotAPIError as e:
            raise TokenRefreshError(
                f"Token exchange failed: {e.message}",
                details={"url": token_url},
            ) from e

    if response.status_code != 200:
        log_auth_event(
            logger,
            "token_exchange_rejected",
            success=False,
            details={"status_code": response.status_code},
        )
        raise TokenRefreshError(
            f"Token exchange rejected with status {response.status_code}",
            details={"status_code": response.status_code, "response": response.text[:500]},
        )

    try:
        return TokenResponse.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise TokenRefreshError(
            "Token exchange returned an unexpected payload",
            details={"error": str(e)},
        ) from e

"""
Chat dispatch for copilot-api.

Sends a prepared request payload to the chat completion endpoint and
returns the decoded JSON body untouched.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..core import (
    get_logger,
    get_settings,
    Settings,
    APIError,
)
from ..models import RequestPayload
from ..utils.http_client import CopilotHTTPClient


logger = get_logger(__name__)


async def send_message(
    request: RequestPayload,
    access_token: str,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """
    Dispatch a chat completion request.

    Args:
        request: Payload built for the call
        access_token: Bearer access token
        settings: Settings to use instead of the global ones
        transport: Optional httpx transport, mainly for tests

    Returns:
        Raw response body

    Raises:
        APIError: If the endpoint answers with a non-success status
        TimeoutError: If the request times out
    """
    settings = settings or get_settings()
    chat_url = settings.api.chat_url

    async with CopilotHTTPClient(access_token, settings=settings, transport=transport) as http:
        response = await http.post(chat_url, json=request.model_dump())

    if response.status_code >= 400:
        logger.warning(
            "Chat request failed",
            status_code=response.status_code,
            model=request.model,
        )
        raise APIError(
            f"Copilot API error: {response.status_code}",
            error_code="upstream_error",
            status_code=response.status_code,
            details={"response": response.text[:500], "model": request.model},
        )

    try:
        return response.json()
    except ValueError as e:
        raise APIError(
            "Copilot API returned a non-JSON body",
            error_code="upstream_error",
            status_code=response.status_code,
        ) from e

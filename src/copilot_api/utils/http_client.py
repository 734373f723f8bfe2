"""
HTTP client utilities for copilot-api.

This module provides a configured HTTP client with timeout handling
and request/response logging. Requests are made exactly once.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

import httpx
from httpx import Response

from ..core import (
    get_logger,
    get_settings,
    Settings,
    APIError,
    TimeoutError,
    log_api_call,
    log_error,
)


class HTTPClient:
    """Thin async HTTP client with call logging."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.logger = get_logger(__name__)

        self.timeout = timeout or self.settings.api.request_timeout

        default_headers = {
            "Accept": "application/json",
        }
        if headers:
            default_headers.update(headers)

        client_kwargs: Dict[str, Any] = {
            "timeout": httpx.Timeout(self.timeout),
            "headers": default_headers,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport

        self.client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """
        Make a single HTTP request.

        Args:
            method: HTTP method
            url: Request URL
            headers: Additional headers
            json: JSON body

        Returns:
            HTTP response, whatever its status

        Raises:
            TimeoutError: If the request times out
            APIError: If the request cannot be sent
        """
        start_time = time.time()

        try:
            response = await self.client.request(
                method=method,
                url=url,
                headers=headers,
                json=json,
            )
        except httpx.TimeoutException as e:
            log_error(self.logger, e, context={"method": method, "url": url})
            raise TimeoutError(
                f"Request to {url} timed out",
                details={"url": url, "timeout": self.timeout},
            ) from e
        except httpx.RequestError as e:
            log_error(self.logger, e, context={"method": method, "url": url})
            raise APIError(
                f"Request failed: {str(e)}",
                error_code="upstream_error",
                details={"url": url, "error": str(e)},
            ) from e

        duration_ms = (time.time() - start_time) * 1000
        log_api_call(
            self.logger,
            service=str(response.request.url.host),
            endpoint=url,
            method=method,
            status_code=response.status_code,
            duration_ms=duration_ms,
            request_size=self._get_request_size(json),
            response_size=len(response.content),
        )

        return response

    async def get(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> Response:
        """Make GET request."""
        return await self.request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """Make POST request."""
        return await self.request("POST", url, headers=headers, json=json)

    def _get_request_size(self, json_data: Optional[Dict[str, Any]]) -> Optional[int]:
        """Calculate JSON request body size in bytes."""
        if json_data:
            return len(json.dumps(json_data).encode("utf-8"))
        return None


class CopilotHTTPClient(HTTPClient):
    """HTTP client carrying the headers the Copilot backend expects."""

    def __init__(
        self,
        access_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        api = settings.api
        headers = {
            "Content-Type": "application/json",
            "Copilot-Integration-Id": api.integration_id,
            "Editor-Version": api.editor_version,
            "Editor-Plugin-Version": api.editor_plugin_version,
            "User-Agent": api.user_agent,
            "openai-intent": "conversation-panel",
        }
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        super().__init__(
            timeout=api.request_timeout,
            headers=headers,
            transport=transport,
            settings=settings,
        )

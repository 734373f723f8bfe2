"""
Public API for copilot-api.

``CopilotAPI`` is what a host plugin exposes to other code: it wires the
token lifecycle, request building, dispatch and response normalization
into a single call.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

from .auth import CredentialStore, TokenManager
from .auth.token_manager import FetchToken
from .core import (
    get_logger,
    get_settings,
    Settings,
    ConfigurationError,
)
from .models import CallOptions, ModelOption, NormalizedResponse, RequestPayload
from .services import (
    ModelManager,
    build_request,
    normalize_response,
    send_message as default_send_message,
)


SendMessage = Callable[[RequestPayload, str], Awaitable[Any]]


class CopilotAPI:
    """Direct model access for host plugins."""

    def __init__(
        self,
        credential_store: CredentialStore,
        context: Optional[str] = None,
        settings: Optional[Settings] = None,
        fetch_token: Optional[FetchToken] = None,
        send_message: Optional[SendMessage] = None,
        models: Optional[List[ModelOption]] = None,
        clock: Callable[[], float] = time.time,
    ):
        if not isinstance(credential_store, CredentialStore):
            raise ConfigurationError(
                "credential_store must provide get_credentials and store_credentials",
                error_code="invalid_credential_store",
            )

        self.settings = settings or get_settings()
        self.logger = get_logger(__name__)

        self.token_manager = TokenManager(
            credential_store,
            context=context,
            fetch_token=fetch_token,
            clock=clock,
            settings=self.settings,
        )
        self.model_manager = ModelManager(models, settings=self.settings)

        # Raw dispatch, exposed for callers sending prebuilt payloads
        self.send_message: SendMessage = send_message or self._default_send_message

    async def _default_send_message(self, request: RequestPayload, access_token: str) -> Dict[str, Any]:
        return await default_send_message(request, access_token, settings=self.settings)

    async def get_access_token(self) -> str:
        """Get the current access token (refreshes if needed)."""
        return await self.token_manager.get_access_token()

    def get_available_models(self) -> List[ModelOption]:
        """Get list of available models."""
        return self.model_manager.list_models()

    def get_current_model(self) -> ModelOption:
        """Get the currently selected model."""
        return self.model_manager.get_current_model()

    async def send_message_wrapped(
        self,
        options: Optional[Union[CallOptions, Mapping[str, Any]]] = None,
        **kwargs: Any,
    ) -> NormalizedResponse:
        """
        Send a prompt to the chat API and get a normalized response.

        Options may be given as ``CallOptions``, a mapping (camelCase keys
        accepted) or keyword arguments. Nothing is retried: the first
        failure of any stage is raised unchanged.

        Args:
            options: Call options

        Returns:
            Normalized response

        Raises:
            AuthenticationError: If no personal access token is stored
            TokenRefreshError: If the access token could not be refreshed
            InvalidResponseError: If the API response has no usable choice
        """
        call_options = self._coerce_options(options, kwargs)

        access_token = await self.get_access_token()

        model = call_options.model or self.get_current_model().value

        request = build_request(
            call_options,
            model,
            default_system_prompt=self.settings.chat.system_prompt,
        )

        raw = await self.send_message(request, access_token)

        self.logger.debug(
            "Copilot API response",
            request=request.model_dump(),
            response=raw,
        )

        return normalize_response(raw)

    send = send_message_wrapped

    async def is_authenticated(self) -> bool:
        """Check if user is authenticated."""
        return await self.token_manager.is_authenticated()

    @staticmethod
    def _coerce_options(
        options: Optional[Union[CallOptions, Mapping[str, Any]]],
        extra: Dict[str, Any],
    ) -> CallOptions:
        if options is not None and extra:
            raise TypeError("Pass call options either as one argument or as keywords, not both")

        if isinstance(options, CallOptions):
            return options
        return CallOptions.model_validate(dict(options or extra))

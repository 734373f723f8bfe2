"""
Response normalization for copilot-api.

Turns the raw chat completion payload into ``NormalizedResponse``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ..core import InvalidResponseError
from ..models import NormalizedResponse, NormalizedUsage, RawResponse


def normalize_response(
    raw: Optional[Union[RawResponse, Mapping[str, Any]]],
) -> NormalizedResponse:
    """
    Map a raw API response to the public response shape.

    Only the first choice is read; a call never requests more than one.

    Args:
        raw: Response as returned by the chat endpoint

    Returns:
        Normalized response; ``usage`` is None when the API sent none

    Raises:
        InvalidResponseError: If the response is absent, malformed or has no choices
    """
    if not raw:
        raise InvalidResponseError(details={"reason": "empty_response"})

    # An absent or empty choices list is reported as such, before shape errors
    if isinstance(raw, Mapping) and not raw.get("choices"):
        raise InvalidResponseError(details={"reason": "no_choices"})

    try:
        response = RawResponse.model_validate(raw)
    except ValidationError as e:
        raise InvalidResponseError(
            details={"reason": "malformed_response", "error": str(e)}
        ) from e

    if not response.choices:
        raise InvalidResponseError(details={"reason": "no_choices"})

    usage = None
    if response.usage is not None:
        usage = NormalizedUsage(
            prompt_tokens=response.usage.prompt_tokens,
            completion_tokens=response.usage.completion_tokens,
            total_tokens=response.usage.total_tokens,
        )

    return NormalizedResponse(
        content=response.choices[0].message.content or "",
        model=response.model,
        id=response.id,
        usage=usage,
    )

"""
Request building for copilot-api.
"""

from __future__ import annotations

from typing import List, Optional

from ..models import CallOptions, ChatMessage, RequestPayload


def build_messages(
    options: CallOptions, default_system_prompt: Optional[str] = None
) -> List[ChatMessage]:
    """
    Assemble the conversation in the order the model reads it.

    Args:
        options: Call options
        default_system_prompt: Plugin-wide system prompt used when the call has none

    Returns:
        System message (if any), then the history, then the prompt as a user message
    """
    messages: List[ChatMessage] = []

    system_prompt = options.system_prompt or default_system_prompt
    if system_prompt:
        messages.append(ChatMessage(role="system", content=system_prompt))

    messages.extend(options.message_history)
    messages.append(ChatMessage(role="user", content=options.prompt))

    return messages


def build_request(
    options: CallOptions,
    model: str,
    default_system_prompt: Optional[str] = None,
) -> RequestPayload:
    """
    Build the wire payload for a call.

    Args:
        options: Call options
        model: Model already resolved by the caller
        default_system_prompt: Plugin-wide system prompt

    Returns:
        Request payload with a single non-streamed completion requested
    """
    return RequestPayload(
        model=model,
        temperature=options.temperature,
        top_p=options.top_p,
        messages=build_messages(options, default_system_prompt),
    )

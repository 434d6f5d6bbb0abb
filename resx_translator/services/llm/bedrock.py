"""Amazon Bedrock transport over the Converse API.

boto3 is synchronous, so every call runs in a worker thread via
asyncio.to_thread to keep the event loop free. No retries and no local
timeout: a throttled or failed call surfaces immediately and the caller
decides what to do with it.
"""

from __future__ import annotations

import asyncio
from typing import Any, Sequence

import structlog

from resx_translator.services.llm.base import ConversationTurn, LLMProvider, LLMResponse
from resx_translator.services.llm.credentials import build_session

logger = structlog.get_logger(__name__)

_SERVICE_NAME = "bedrock-runtime"


def turns_to_messages(turns: Sequence[ConversationTurn]) -> list[dict[str, Any]]:
    """Convert turns to Converse ``messages``.

    Converse rejects two consecutive messages with the same role, so
    adjacent same-role turns are folded into one message carrying one
    text block per turn.
    """
    messages: list[dict[str, Any]] = []
    for turn in turns:
        block = {"text": turn.text}
        if messages and messages[-1]["role"] == turn.role:
            messages[-1]["content"].append(block)
        else:
            messages.append({"role": turn.role, "content": [block]})
    return messages


def _first_text(response: dict[str, Any]) -> str:
    content = response.get("output", {}).get("message", {}).get("content") or []
    if not content:
        return ""
    return content[0].get("text") or ""


class BedrockProvider(LLMProvider):
    """Bedrock ``converse`` behind the LLMProvider interface."""

    def __init__(self, client: Any) -> None:
        self._client = client
        self._closed = False

    @classmethod
    def from_profile(cls, profile_name: str, region: str) -> "BedrockProvider":
        """Build a provider from a local AWS profile.

        Raises:
            ConfigurationError: If the profile cannot supply credentials.
        """
        session = build_session(profile_name, region)
        client = session.client(_SERVICE_NAME, region_name=region)
        logger.info("bedrock_provider_initialized", profile=profile_name, region=region)
        return cls(client)

    async def converse(
        self,
        model_id: str,
        turns: Sequence[ConversationTurn],
        *,
        max_tokens: int,
        temperature: float,
        top_p: float,
    ) -> LLMResponse:
        """Send the conversation to Bedrock and return the first reply block."""
        messages = turns_to_messages(turns)
        try:
            response = await asyncio.to_thread(
                self._client.converse,
                modelId=model_id,
                messages=messages,
                inferenceConfig={
                    "maxTokens": max_tokens,
                    "temperature": temperature,
                    "topP": top_p,
                },
            )
        except Exception as e:
            logger.error(
                "bedrock_converse_failed",
                error=str(e),
                error_type=type(e).__name__,
                model=model_id,
                message_count=len(messages),
            )
            raise

        usage = response.get("usage") or {}
        result = LLMResponse(
            text=_first_text(response),
            input_tokens=usage.get("inputTokens", 0),
            output_tokens=usage.get("outputTokens", 0),
        )
        logger.debug(
            "bedrock_converse_ok",
            model=model_id,
            message_count=len(messages),
            input_tokens=result.input_tokens,
            output_tokens=result.output_tokens,
            stop_reason=response.get("stopReason"),
        )
        return result

    async def close(self) -> None:
        """Close the underlying botocore client. Repeated calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        await asyncio.to_thread(self._client.close)
        logger.debug("bedrock_provider_closed")

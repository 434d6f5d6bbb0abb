"""Abstract model-invocation transport.

The translator never imports a concrete provider directly. The concrete
provider (BedrockProvider in production, a mock in tests) is created
once per TranslationSession and handed to it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal, Sequence

Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class ConversationTurn:
    """One role-tagged message in a conversation."""

    role: Role
    text: str

    @classmethod
    def user(cls, text: str) -> "ConversationTurn":
        return cls(role="user", text=text)

    @classmethod
    def assistant(cls, text: str) -> "ConversationTurn":
        return cls(role="assistant", text=text)


@dataclass(frozen=True)
class LLMResponse:
    """Structured reply from a model call, including token usage.

    ``text`` is the first content block of the reply, or "" when the
    model returned no text at all.
    """

    text: str
    input_tokens: int = 0
    output_tokens: int = 0


class LLMProvider(ABC):
    """Abstract base class for model-invocation transports."""

    @abstractmethod
    async def converse(
        self,
        model_id: str,
        turns: Sequence[ConversationTurn],
        *,
        max_tokens: int,
        temperature: float,
        top_p: float,
    ) -> LLMResponse:
        """Send an ordered conversation and return the model's reply turn.

        Args:
            model_id: Provider model identifier.
            turns: Full conversation to replay, oldest first.
            max_tokens: Maximum tokens in the generated reply.
            temperature: Sampling temperature (0.0–1.0).
            top_p: Nucleus-sampling threshold (0.0–1.0).

        Returns:
            LLMResponse with the reply text and token usage counts.

        Raises:
            Exception: Whatever the underlying SDK raises. Mapping to the
                typed taxonomy happens in the caller, not here.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the remote connection. Must be safe to call once."""
        ...

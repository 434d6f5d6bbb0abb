"""Append-only conversation log replayed to the model on every call.

Bedrock calls are stateless, so the whole transcript is resent each
time. Nothing here trims or windows it: a session that translates N
strings sends O(N) turns on its last call, and latency and token cost
grow with it. Use one session per file or batch to keep that bounded.
"""

from __future__ import annotations

from typing import Iterator

from resx_translator.services.llm.base import ConversationTurn


class Transcript:
    """Ordered, append-only list of turns.

    The only way to remove turns is rolling back to an earlier length,
    which context seeding uses to undo a failed attempt.
    """

    def __init__(self) -> None:
        self._turns: list[ConversationTurn] = []

    def append(self, turn: ConversationTurn) -> None:
        self._turns.append(turn)

    def rollback(self, length: int) -> tuple[ConversationTurn, ...]:
        """Truncate to ``length`` turns and return the dropped ones, oldest first."""
        if length < 0 or length > len(self._turns):
            raise ValueError(
                f"length {length} outside transcript of {len(self._turns)} turns"
            )
        removed = tuple(self._turns[length:])
        del self._turns[length:]
        return removed

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(tuple(self._turns))

    def __bool__(self) -> bool:
        return bool(self._turns)

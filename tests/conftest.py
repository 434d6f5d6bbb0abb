"""Shared pytest fixtures for the resx-translator test suite.

Provides:
  - MockLLMProvider: scripted LLMProvider that records every converse() call
  - mock_llm: MockLLMProvider with no scripted replies
  - session: TranslationSession wired to mock_llm
  - client_error: factory for botocore ClientError faults
  - aws_profile_files: isolated AWS config/credentials files for one test

No test talks to AWS. Bedrock itself is only reached through
botocore's Stubber in the integration tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Sequence

import pytest
from botocore.exceptions import ClientError

from resx_translator.services.llm.base import ConversationTurn, LLMProvider, LLMResponse
from resx_translator.services.translation.translator import TranslationSession

TEST_MODEL_ID = "test.anthropic.claude-model-v1:0"


# ---------------------------------------------------------------------------
# Mock LLM Provider
# ---------------------------------------------------------------------------


class MockLLMProvider(LLMProvider):
    """Returns scripted replies in order; an exception in the script is raised instead.

    Once the script runs out, every call returns ``default_text``.
    """

    def __init__(
        self,
        replies: Sequence[str | BaseException] | None = None,
        default_text: str = "Mock response",
    ) -> None:
        self._replies: list[str | BaseException] = list(replies or [])
        self._default_text = default_text
        self.converse_calls: list[dict[str, Any]] = []
        self.close_calls = 0

    def script(self, *replies: str | BaseException) -> None:
        self._replies.extend(replies)

    async def converse(
        self,
        model_id: str,
        turns: Sequence[ConversationTurn],
        *,
        max_tokens: int,
        temperature: float,
        top_p: float,
    ) -> LLMResponse:
        self.converse_calls.append(
            {
                "model_id": model_id,
                "turns": tuple(turns),
                "max_tokens": max_tokens,
                "temperature": temperature,
                "top_p": top_p,
            }
        )
        reply = self._replies.pop(0) if self._replies else self._default_text
        if isinstance(reply, BaseException):
            raise reply
        return LLMResponse(text=reply, input_tokens=50, output_tokens=10)

    async def close(self) -> None:
        self.close_calls += 1


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_llm() -> MockLLMProvider:
    """Mock LLM provider fixture."""
    return MockLLMProvider()


@pytest.fixture
def session(mock_llm: MockLLMProvider) -> TranslationSession:
    """TranslationSession backed by mock_llm."""
    return TranslationSession(mock_llm, model_id=TEST_MODEL_ID)


@pytest.fixture
def client_error() -> Callable[..., ClientError]:
    """Build a botocore ClientError the way the SDK raises it for ``converse``."""

    def _make(code: str, message: str = "simulated fault") -> ClientError:
        return ClientError(
            {"Error": {"Code": code, "Message": message}},
            "Converse",
        )

    return _make


@pytest.fixture
def aws_profile_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point botocore at empty config/credentials files under tmp_path.

    Ambient AWS env vars are cleared so the developer's own profile
    never leaks into a test. Returns the credentials file path.
    """
    config_file = tmp_path / "config"
    credentials_file = tmp_path / "credentials"
    config_file.write_text("", encoding="utf-8")
    credentials_file.write_text("", encoding="utf-8")

    for var in (
        "AWS_PROFILE",
        "AWS_DEFAULT_PROFILE",
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "AWS_CONTAINER_CREDENTIALS_RELATIVE_URI",
        "AWS_CONTAINER_CREDENTIALS_FULL_URI",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(config_file))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(credentials_file))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    return credentials_file

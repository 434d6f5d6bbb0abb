"""Translation session: per-string translate and detect over one model connection.

One TranslationSession per file or batch run. It owns two transcripts:

  - translation: seeded once with the translator instruction plus one
    acknowledgment round trip, then grows by a user/assistant pair per
    translated string. Replayed in full on every call.
  - detection: holds only the detection instruction. Each detect call
    sends it together with a one-shot prompt; replies are not kept.

Error handling is asymmetric. translate() raises the typed
TranslatorError taxonomy with the original fault chained. detect_language()
never raises: detection is an advisory hint, so every failure degrades
to DEFAULT_LANGUAGE.

Not safe for concurrent calls on the same transcript. Serialize calls
per session, or give each worker its own session.
"""

from __future__ import annotations

import re
from types import TracebackType

import structlog

from resx_translator.core.config import Settings
from resx_translator.core.config import settings as default_settings
from resx_translator.core.exceptions import ConfigurationError
from resx_translator.services.llm.base import ConversationTurn, LLMProvider, LLMResponse
from resx_translator.services.llm.bedrock import BedrockProvider
from resx_translator.services.llm.errors import map_bedrock_error
from resx_translator.services.translation.prompts import (
    DETECTION_INSTRUCTION,
    FALLBACK_ACKNOWLEDGMENT,
    TRANSLATION_SEED,
    build_detection_prompt,
    build_translation_prompt,
)
from resx_translator.services.translation.transcript import Transcript

logger = structlog.get_logger(__name__)

DEFAULT_LANGUAGE = "en"

_LANGUAGE_CODE = re.compile(r"[a-z]{2}")


class TranslationSession:
    """Translate and detect UI strings through one model connection."""

    def __init__(
        self,
        provider: LLMProvider,
        *,
        model_id: str = default_settings.model_id,
        translate_max_tokens: int = default_settings.translate_max_tokens,
        seed_max_tokens: int = default_settings.seed_max_tokens,
        detect_max_tokens: int = default_settings.detect_max_tokens,
        temperature: float = default_settings.temperature,
        top_p: float = default_settings.top_p,
    ) -> None:
        self._provider = provider
        self._model_id = model_id
        self._translate_max_tokens = translate_max_tokens
        self._seed_max_tokens = seed_max_tokens
        self._detect_max_tokens = detect_max_tokens
        self._temperature = temperature
        self._top_p = top_p

        self._translation = Transcript()
        self._detection = Transcript()
        self._translation_context_initialized = False
        self._detection_context_initialized = False
        self._closed = False

    @classmethod
    def from_settings(
        cls,
        config: Settings | None = None,
        provider: LLMProvider | None = None,
    ) -> "TranslationSession":
        """Build a session from settings, connecting to Bedrock unless a provider is given.

        Raises:
            ConfigurationError: If credentials for the configured profile
                cannot be resolved or the client cannot be created. No
                session exists in that case.
        """
        config = config or default_settings
        if provider is None:
            try:
                provider = BedrockProvider.from_profile(config.aws_profile, config.aws_region)
            except ConfigurationError:
                raise
            except Exception as e:
                logger.error(
                    "translation_session_init_failed",
                    profile=config.aws_profile,
                    region=config.aws_region,
                    error=str(e),
                )
                raise ConfigurationError(
                    "Failed to initialize AWS Bedrock client. Please ensure AWS "
                    "credentials are configured correctly.",
                    cause=e,
                ) from e

        logger.info("translation_session_created", model=config.model_id)
        return cls(
            provider,
            model_id=config.model_id,
            translate_max_tokens=config.translate_max_tokens,
            seed_max_tokens=config.seed_max_tokens,
            detect_max_tokens=config.detect_max_tokens,
            temperature=config.temperature,
            top_p=config.top_p,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def model_id(self) -> str:
        return self._model_id

    @property
    def translation_transcript(self) -> Transcript:
        return self._translation

    @property
    def detection_transcript(self) -> Transcript:
        return self._detection

    @property
    def translation_context_initialized(self) -> bool:
        return self._translation_context_initialized

    @property
    def detection_context_initialized(self) -> bool:
        return self._detection_context_initialized

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise ConfigurationError("Translation session is closed.")

    async def _converse(self, turns: tuple[ConversationTurn, ...], max_tokens: int) -> LLMResponse:
        return await self._provider.converse(
            self._model_id,
            turns,
            max_tokens=max_tokens,
            temperature=self._temperature,
            top_p=self._top_p,
        )

    # ------------------------------------------------------------------
    # Context seeding
    # ------------------------------------------------------------------

    async def ensure_translation_context(self) -> None:
        """Seed the translation transcript once per session.

        Sends the seed turn alone and stores the model's acknowledgment.
        Turns left over from earlier unseeded exchanges are kept, after
        the seed pair. On failure every turn added by this attempt is
        rolled back, the session stays unseeded (the next translate tries
        again) and no error is raised. Cancellation rolls back the same
        way and then propagates.
        """
        if self._translation_context_initialized:
            return

        earlier = self._translation.rollback(0)
        self._translation.append(ConversationTurn.user(TRANSLATION_SEED))
        seeded = False
        try:
            response = await self._converse(self._translation.turns, self._seed_max_tokens)
            acknowledgment = response.text.strip() or FALLBACK_ACKNOWLEDGMENT
            self._translation.append(ConversationTurn.assistant(acknowledgment))
            seeded = True
        except Exception as e:
            # Flag stays unset: every later call retries the round trip.
            logger.warning(
                "translation_context_seed_failed",
                error=str(e),
                error_type=type(e).__name__,
                model=self._model_id,
            )
        finally:
            # Runs on cancellation too, so a half-built seed never survives.
            if not seeded:
                self._translation.rollback(0)
            for turn in earlier:
                self._translation.append(turn)

        if seeded:
            self._translation_context_initialized = True
            logger.debug("translation_context_seeded", carried_turns=len(earlier))

    def ensure_detection_context(self) -> None:
        """Add the detection instruction turn on first use. No round trip."""
        if self._detection_context_initialized:
            return
        self._detection.append(ConversationTurn.user(DETECTION_INSTRUCTION))
        self._detection_context_initialized = True

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def translate(
        self,
        text: str,
        target_language: str,
        source_language: str | None = None,
    ) -> str:
        """Translate one UI string.

        Args:
            text: String to translate. Empty or whitespace-only input is
                returned unchanged without calling the model.
            target_language: Target language code, e.g. "fr" or "zh-CN".
            source_language: Source language code. None, "" or "auto"
                leave the source unspecified.

        Returns:
            The translated text, stripped. If the model returns no text
            the original ``text`` is returned.

        Raises:
            TranslatorError: One of ConfigurationError, ModelNotFoundError,
                AccessDeniedError, RateLimitedError or ServiceError, with
                the provider fault chained as ``__cause__``.
        """
        if not text or not text.strip():
            return text

        self._ensure_open()
        await self.ensure_translation_context()

        prompt = build_translation_prompt(text, target_language, source_language)
        self._translation.append(ConversationTurn.user(prompt))

        try:
            response = await self._converse(self._translation.turns, self._translate_max_tokens)
        except Exception as e:
            error = map_bedrock_error(e, self._model_id)
            logger.error(
                "translation_failed",
                code=error.code,
                error_type=type(e).__name__,
                target=target_language,
                text_len=len(text),
            )
            if error is e:
                raise
            raise error from e

        translated = response.text.strip() or text
        self._translation.append(ConversationTurn.assistant(translated))
        logger.debug(
            "translation_ok",
            target=target_language,
            source=source_language,
            text_len=len(text),
            transcript_len=len(self._translation),
            input_tokens=response.input_tokens,
            output_tokens=response.output_tokens,
        )
        return translated

    async def detect_language(self, text: str) -> str:
        """Detect the ISO 639-1 code of ``text``.

        Never raises. Empty input, any model failure and any reply that
        is not a two-letter code all return DEFAULT_LANGUAGE.
        """
        if not text or not text.strip():
            return DEFAULT_LANGUAGE

        try:
            self._ensure_open()
            self.ensure_detection_context()
            turns = (
                *self._detection.turns,
                ConversationTurn.user(build_detection_prompt(text)),
            )
            response = await self._converse(turns, self._detect_max_tokens)
        except Exception as e:
            logger.warning(
                "language_detection_failed",
                error=str(e),
                error_type=type(e).__name__,
                text_len=len(text),
            )
            return DEFAULT_LANGUAGE

        code = response.text.strip().lower().strip("`\"'.,:;!?()[]{}")
        if not _LANGUAGE_CODE.fullmatch(code):
            logger.warning(
                "language_detection_unexpected_output",
                raw_response=response.text.strip()[:20],
                text_len=len(text),
            )
            return DEFAULT_LANGUAGE

        logger.debug("language_detected", language=code, text_len=len(text))
        return code

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Release the model connection. Only the first call does anything."""
        if self._closed:
            return
        self._closed = True
        await self._provider.close()
        logger.info(
            "translation_session_closed",
            translation_turns=len(self._translation),
        )

    async def __aenter__(self) -> "TranslationSession":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

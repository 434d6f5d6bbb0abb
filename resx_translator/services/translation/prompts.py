"""Fixed instruction turns and per-request prompt builders."""

from __future__ import annotations

from resx_translator.services.translation.languages import display_name

TRANSLATOR_INSTRUCTION = (
    "You are a professional translator specializing in software localization. "
    "Your task is to translate user interface strings while preserving their "
    "meaning, tone, and technical accuracy. Always respond with only the "
    "translated text, no explanations or additional content."
)

TRANSLATOR_HANDSHAKE = (
    "I will be providing strings from a software application for translation. "
    "Please translate each one accurately while preserving technical terms and "
    "UI conventions."
)

# Opening user turn of every translation transcript.
TRANSLATION_SEED = f"{TRANSLATOR_INSTRUCTION}\n\n{TRANSLATOR_HANDSHAKE}"

# Stored when the seeding round trip succeeds but returns no text.
FALLBACK_ACKNOWLEDGMENT = "Understood. I'm ready to translate your software strings."

DETECTION_INSTRUCTION = (
    "You are a language detection expert. When given text, respond only with "
    "the ISO 639-1 language code (2 letters lowercase). Never provide "
    "explanations or additional text."
)

UNSPECIFIED_SOURCE = "auto"


def build_translation_prompt(
    text: str, target_language: str, source_language: str | None = None
) -> str:
    """Render the per-string translation request.

    A missing, empty or "auto" source language leaves the "from" clause out.
    """
    target_name = display_name(target_language)
    if source_language and source_language != UNSPECIFIED_SOURCE:
        return f'Translate from {display_name(source_language)} to {target_name}: "{text}"'
    return f'Translate to {target_name}: "{text}"'


def build_detection_prompt(text: str) -> str:
    return f'Detect the language: "{text}"'

"""Translation services - session, transcripts, prompts and language table."""

from resx_translator.services.translation.transcript import Transcript
from resx_translator.services.translation.translator import (
    DEFAULT_LANGUAGE,
    TranslationSession,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "Transcript",
    "TranslationSession",
]

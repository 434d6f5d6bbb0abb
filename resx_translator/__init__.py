"""Bedrock-backed translation and language detection for UI strings."""

from resx_translator.core.exceptions import (
    AccessDeniedError,
    ConfigurationError,
    ModelNotFoundError,
    RateLimitedError,
    ServiceError,
    TranslatorError,
)
from resx_translator.services.translation.translator import (
    DEFAULT_LANGUAGE,
    TranslationSession,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LANGUAGE",
    "TranslationSession",
    "TranslatorError",
    "ConfigurationError",
    "ModelNotFoundError",
    "AccessDeniedError",
    "RateLimitedError",
    "ServiceError",
]

"""Map botocore faults onto the TranslatorError taxonomy.

Checks run most-specific first: known Bedrock error codes, then any
other service-side error, then local client/transport faults, then
anything unanticipated.
"""

from __future__ import annotations

from botocore.exceptions import BotoCoreError, ClientError

from resx_translator.core.exceptions import (
    AccessDeniedError,
    ConfigurationError,
    ModelNotFoundError,
    RateLimitedError,
    ServiceError,
    TranslatorError,
)

_MODEL_NOT_FOUND_CODES = frozenset({"ValidationException", "ResourceNotFoundException"})


def _client_error_code(exc: ClientError) -> str:
    return exc.response.get("Error", {}).get("Code", "") or "Unknown"


def map_bedrock_error(exc: BaseException, model_id: str) -> TranslatorError:
    """Return the typed error for ``exc``. The original fault is kept as ``cause``."""
    if isinstance(exc, TranslatorError):
        return exc

    if isinstance(exc, ClientError):
        code = _client_error_code(exc)
        if code in _MODEL_NOT_FOUND_CODES:
            return ModelNotFoundError(model_id, cause=exc)
        if code == "AccessDeniedException":
            return AccessDeniedError(cause=exc)
        if code == "ThrottlingException":
            return RateLimitedError(cause=exc)
        if code == "ServiceUnavailableException":
            return ServiceError(
                "ServiceUnavailable",
                "AWS Bedrock service is temporarily unavailable. Please try again later.",
                cause=exc,
            )
        if code == "InternalServerException":
            return ServiceError(
                "InternalServerError",
                "AWS Bedrock encountered an internal error. Please try again later.",
                cause=exc,
            )
        message = exc.response.get("Error", {}).get("Message", "") or str(exc)
        return ServiceError(code, f"AWS Bedrock error ({code}): {message}", cause=exc)

    if isinstance(exc, BotoCoreError):
        return ConfigurationError(cause=exc)

    return ServiceError("UnknownError", f"Unexpected error during translation: {exc}", cause=exc)

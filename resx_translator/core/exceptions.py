"""Custom exception classes for structured error handling.

Every failure on the translate path surfaces as one of the five
TranslatorError subclasses below. Callers (UI, CLI) branch on the type
or on ``code`` to show the right remediation: reconfigure credentials,
request model access, or wait and retry.
"""

from typing import Any


class TranslatorError(Exception):
    """Base exception for all translator errors."""

    retryable: bool = False

    def __init__(
        self,
        code: str,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.cause = cause
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class ConfigurationError(TranslatorError):
    def __init__(
        self,
        message: str = (
            "AWS client configuration error. Please check your AWS credentials "
            "and network connection."
        ),
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(code="CONFIGURATION_ERROR", message=message, cause=cause)


class ModelNotFoundError(TranslatorError):
    def __init__(
        self,
        model_id: str,
        message: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.model_id = model_id
        super().__init__(
            code="MODEL_NOT_FOUND",
            message=message
            or (
                f"Model '{model_id}' is not available in your AWS region. "
                "Please check your Bedrock model access in the AWS Console."
            ),
            cause=cause,
        )


class AccessDeniedError(TranslatorError):
    def __init__(
        self,
        message: str = (
            "Access denied to AWS Bedrock. Please check your AWS credentials and "
            "IAM permissions (bedrock:InvokeModel required)."
        ),
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(code="ACCESS_DENIED", message=message, cause=cause)


class RateLimitedError(TranslatorError):
    retryable = True

    def __init__(
        self,
        message: str = "AWS Bedrock rate limit exceeded. Please wait a moment and try again.",
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(code="RATE_LIMITED", message=message, cause=cause)


# Provider-side codes that are known to clear up on their own.
_TRANSIENT_SERVICE_CODES = frozenset({"ServiceUnavailable", "InternalServerError"})


class ServiceError(TranslatorError):
    def __init__(
        self,
        error_code: str,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        self.error_code = error_code
        super().__init__(code="SERVICE_ERROR", message=message, cause=cause)

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.error_code in _TRANSIENT_SERVICE_CODES

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["error"]["provider_code"] = self.error_code
        return payload

"""Unit tests for map_bedrock_error() and the exception taxonomy.

Tests:
  - each Bedrock error code maps to its typed error
  - unknown service codes keep the provider's code
  - local botocore faults map to ConfigurationError
  - anything else maps to ServiceError("UnknownError")
  - the original fault is always kept as ``cause``
"""

from __future__ import annotations

from typing import Callable

import pytest
from botocore.exceptions import (
    ClientError,
    EndpointConnectionError,
    NoCredentialsError,
    NoRegionError,
)

from resx_translator.core.exceptions import (
    AccessDeniedError,
    ConfigurationError,
    ModelNotFoundError,
    RateLimitedError,
    ServiceError,
)
from resx_translator.services.llm.errors import map_bedrock_error

_MODEL = "us.anthropic.claude-sonnet-4-20250514-v1:0"


class TestServiceFaults:
    def test_validation_is_model_not_found(self, client_error: Callable[..., ClientError]) -> None:
        fault = client_error("ValidationException", "The provided model identifier is invalid.")
        error = map_bedrock_error(fault, _MODEL)
        assert isinstance(error, ModelNotFoundError)
        assert error.model_id == _MODEL
        assert _MODEL in error.message
        assert error.cause is fault

    def test_resource_not_found_is_model_not_found(
        self, client_error: Callable[..., ClientError]
    ) -> None:
        error = map_bedrock_error(client_error("ResourceNotFoundException"), _MODEL)
        assert isinstance(error, ModelNotFoundError)

    def test_access_denied(self, client_error: Callable[..., ClientError]) -> None:
        fault = client_error("AccessDeniedException")
        error = map_bedrock_error(fault, _MODEL)
        assert isinstance(error, AccessDeniedError)
        assert "bedrock:InvokeModel" in error.message
        assert error.cause is fault

    def test_throttling_is_rate_limited(self, client_error: Callable[..., ClientError]) -> None:
        fault = client_error("ThrottlingException")
        error = map_bedrock_error(fault, _MODEL)
        assert isinstance(error, RateLimitedError)
        assert error.retryable is True
        assert error.cause is fault

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("ServiceUnavailableException", "ServiceUnavailable"),
            ("InternalServerException", "InternalServerError"),
        ],
    )
    def test_transient_service_faults(
        self,
        client_error: Callable[..., ClientError],
        code: str,
        expected: str,
    ) -> None:
        fault = client_error(code)
        error = map_bedrock_error(fault, _MODEL)
        assert isinstance(error, ServiceError)
        assert error.error_code == expected
        assert error.retryable is True
        assert error.cause is fault

    def test_other_service_code_is_kept(self, client_error: Callable[..., ClientError]) -> None:
        fault = client_error("ModelTimeoutException", "Model took too long")
        error = map_bedrock_error(fault, _MODEL)
        assert isinstance(error, ServiceError)
        assert error.error_code == "ModelTimeoutException"
        assert "Model took too long" in error.message
        assert error.retryable is False
        assert error.cause is fault


class TestLocalFaults:
    @pytest.mark.parametrize(
        "fault",
        [
            NoCredentialsError(),
            NoRegionError(),
            EndpointConnectionError(endpoint_url="https://bedrock-runtime.us-east-1.amazonaws.com"),
        ],
    )
    def test_botocore_faults_are_configuration_errors(self, fault: Exception) -> None:
        error = map_bedrock_error(fault, _MODEL)
        assert isinstance(error, ConfigurationError)
        assert error.retryable is False
        assert error.cause is fault

    def test_unexpected_error_is_unknown(self) -> None:
        fault = KeyError("output")
        error = map_bedrock_error(fault, _MODEL)
        assert isinstance(error, ServiceError)
        assert error.error_code == "UnknownError"
        assert error.cause is fault

    def test_typed_error_passes_through(self) -> None:
        original = RateLimitedError()
        assert map_bedrock_error(original, _MODEL) is original


class TestErrorPayloads:
    def test_to_dict(self) -> None:
        assert AccessDeniedError("nope").to_dict() == {
            "error": {"code": "ACCESS_DENIED", "message": "nope"}
        }

    def test_service_error_payload_carries_provider_code(self) -> None:
        payload = ServiceError("ServiceUnavailable", "down").to_dict()
        assert payload["error"]["code"] == "SERVICE_ERROR"
        assert payload["error"]["provider_code"] == "ServiceUnavailable"

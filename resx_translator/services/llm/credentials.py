"""Resolve AWS credentials for a named profile in the local profile store."""

from __future__ import annotations

import boto3
import structlog
from botocore.credentials import ReadOnlyCredentials
from botocore.exceptions import BotoCoreError

from resx_translator.core.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


def build_session(profile_name: str, region: str) -> boto3.Session:
    """Create a boto3 session bound to ``profile_name``.

    Raises:
        ConfigurationError: If the profile does not exist or has no
            credentials attached.
    """
    try:
        session = boto3.Session(profile_name=profile_name, region_name=region)
        credentials = session.get_credentials()
    except BotoCoreError as e:
        logger.error("aws_profile_unusable", profile=profile_name, error=str(e))
        raise ConfigurationError(
            f"AWS profile '{profile_name}' could not be loaded. Please configure "
            "your AWS credentials using the AWS CLI or SDK.",
            cause=e,
        ) from e

    if credentials is None:
        logger.error("aws_credentials_not_found", profile=profile_name)
        raise ConfigurationError(
            "AWS credentials not found. Please configure your AWS credentials "
            "using the AWS CLI or SDK."
        )

    logger.debug("aws_session_created", profile=profile_name, region=region)
    return session


def resolve_credentials(profile_name: str, region: str = "us-east-1") -> ReadOnlyCredentials:
    """Return frozen access credentials for ``profile_name``."""
    session = build_session(profile_name, region)
    try:
        return session.get_credentials().get_frozen_credentials()
    except BotoCoreError as e:
        logger.error("aws_credentials_refresh_failed", profile=profile_name, error=str(e))
        raise ConfigurationError(
            f"AWS credentials for profile '{profile_name}' could not be refreshed.",
            cause=e,
        ) from e

"""Persisted AWS profile selection (profile name + region).

Stored as indented JSON next to the working directory. A missing or
corrupt file is never fatal: the defaults are returned and the problem
is logged, because the translator can still run against the default
profile.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_pascal

logger = structlog.get_logger(__name__)

CONFIG_FILE_NAME = "aws-config.json"


class AwsProfileConfig(BaseModel):
    """Which local AWS profile and region the translator talks to.

    Written with ``ProfileName``/``Region`` keys so files from older
    installs keep loading. Snake-case keys are accepted too.
    """

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    profile_name: str = "default"
    region: str = "us-east-1"


def default_config_path() -> Path:
    return Path.cwd() / CONFIG_FILE_NAME


def load_profile_config(path: Path | None = None) -> AwsProfileConfig:
    """Load the stored profile config, falling back to defaults."""
    path = path or default_config_path()
    if not path.exists():
        logger.debug("profile_config_missing", path=str(path))
        return AwsProfileConfig()

    try:
        config = AwsProfileConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValidationError) as e:
        logger.warning("profile_config_unreadable", path=str(path), error=str(e))
        return AwsProfileConfig()

    logger.debug(
        "profile_config_loaded",
        path=str(path),
        profile=config.profile_name,
        region=config.region,
    )
    return config


def save_profile_config(config: AwsProfileConfig, path: Path | None = None) -> bool:
    """Write the profile config. Returns False (and logs) if the write fails."""
    path = path or default_config_path()
    try:
        path.write_text(config.model_dump_json(indent=2, by_alias=True), encoding="utf-8")
    except OSError as e:
        logger.warning("profile_config_save_failed", path=str(path), error=str(e))
        return False

    logger.info(
        "profile_config_saved",
        path=str(path),
        profile=config.profile_name,
        region=config.region,
    )
    return True

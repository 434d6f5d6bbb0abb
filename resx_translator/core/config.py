"""Application configuration via pydantic-settings.

Values are read from RESX_TRANSLATOR_* environment variables and an
optional .env file in the working directory. The .env file takes
precedence over OS-level environment variables so stale system env vars
never shadow the project config.
No credentials live here: only the AWS profile *name* is configured,
the secrets stay in the local AWS profile store.
"""

from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from resx_translator.core.profile_store import AwsProfileConfig

DEFAULT_MODEL_ID = "us.anthropic.claude-sonnet-4-20250514-v1:0"


class Settings(BaseSettings):
    """Central translator settings. .env file wins over OS env vars."""

    model_config = SettingsConfigDict(
        env_prefix="RESX_TRANSLATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=(),
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Override source priority: .env file > OS env vars > defaults."""
        return (init_settings, dotenv_settings, env_settings, file_secret_settings)

    # --- AWS ---
    aws_profile: str = "default"
    aws_region: str = "us-east-1"

    # --- Model ---
    model_id: str = DEFAULT_MODEL_ID
    translate_max_tokens: int = 4000
    seed_max_tokens: int = 100
    detect_max_tokens: int = 10
    temperature: float = 0.1
    top_p: float = 0.9

    # --- App ---
    log_level: str = "INFO"

    def with_profile_config(self, config: AwsProfileConfig) -> "Settings":
        """Return a copy pointing at the profile and region of a stored config."""
        return self.model_copy(
            update={"aws_profile": config.profile_name, "aws_region": config.region}
        )


settings = Settings()

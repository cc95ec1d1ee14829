from typing import Literal, Optional

from pydantic import AnyHttpUrl, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class NylasSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NYLAS_", env_file=".env", extra="ignore", validate_default=True)
    api_base_url: AnyHttpUrl = "https://api.nylas.com"
    access_token: Optional[SecretStr] = None

class Settings(BaseSettings):

    # ---- app/runtime ----
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    verify_ssl: bool = True

    # ---- transport ----
    request_timeout: float = 10.0  # seconds, per HTTP call
    max_retries: int = 0  # 0 = a single attempt per operation

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_LOG_LEVEL, APP_VERIFY_SSL, etc.
        env_nested_delimiter='__',
        extra = "ignore"
    )

    # ---- integrations ----
    nylas: NylasSettings = Field(default_factory=NylasSettings)


def get_settings() -> Settings:
    """Build settings from the environment and .env."""
    return Settings()

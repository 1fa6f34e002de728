"""Application configuration using Pydantic Settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOLDED_PROJECTS_BASE_URL = "https://api.holded.com/api/projects/v1"
DEFAULT_HOLDED_TEAM_BASE_URL = "https://api.holded.com/api/team/v1"
DEFAULT_HOLDED_API_KEY_NAME = "HOLDED_API_KEY"
SECRET_FILE_ENV_VARS = (
    "HOLDED_API_KEY",
    "HOST_SERVICE_TOKEN",
)


def _load_secret_file_env_vars() -> None:
    """Allow secrets to be sourced from *_FILE env vars (Docker secrets)."""
    for env_var in SECRET_FILE_ENV_VARS:
        file_var = f"{env_var}_FILE"
        file_path = os.getenv(file_var)
        if not file_path:
            continue
        try:
            value = Path(file_path).read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise RuntimeError(f"Failed to read {file_var} at {file_path}") from exc
        if not value:
            raise ValueError(f"{file_var} is empty")
        os.environ[env_var] = value


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The Holded API key is not a setting: it is looked up on every request
    (host key-store first, then the environment).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ----- Application -----
    app_env: Literal["development", "staging", "production"] = "development"
    app_debug: bool = False

    # ----- Holded -----
    holded_api_key_name: str = DEFAULT_HOLDED_API_KEY_NAME
    holded_projects_base_url: str = DEFAULT_HOLDED_PROJECTS_BASE_URL
    holded_team_base_url: str = DEFAULT_HOLDED_TEAM_BASE_URL
    holded_timeout_seconds: float = Field(default=30.0, gt=0)

    # ----- Host platform -----
    # Empty host_api_url disables the host key-store; only the env fallback is used.
    host_api_url: str = ""
    host_keys_path: str = "/api/core/v1/keys/{name}"
    host_service_token: str = ""

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Ensure secure settings in production environment."""
        if self.is_production and self.app_debug:
            raise ValueError("APP_DEBUG must be false in production!")
        if "{name}" not in self.host_keys_path:
            raise ValueError("HOST_KEYS_PATH must contain a '{name}' placeholder")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    _load_secret_file_env_vars()
    return Settings()

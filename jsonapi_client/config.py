"""Client configuration loaded from the environment."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Default connection settings loaded from environment variables with JSONAPI_CLIENT_ prefix."""

    # Server
    base_url: Optional[str] = None
    timeout: float = 10.0
    # Wire format
    key_format: Optional[Literal["dasherize", "camelize"]] = None
    # Headers
    user_agent: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="JSONAPI_CLIENT_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> ClientSettings:
    """Return cached client settings instance."""
    return ClientSettings()

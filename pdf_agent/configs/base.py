"""
Base configuration settings.

Every settings section reads the process environment first and an optional
.env file second. Unknown variables are ignored so all sections can share
one Lambda environment.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Shared loading rules; subclasses add an env_prefix and their fields."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

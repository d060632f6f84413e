"""
Model provider configuration.

Google Gemini embedding and chat model settings shared by ingestion and query.

Dependencies: pydantic, pydantic_settings
System role: Embedding and LLM provider configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from pdf_agent.configs.base import BaseSettings


class ModelSettings(BaseSettings):
    """Embedding and chat model settings."""

    model_config = SettingsConfigDict(
        env_prefix="MODELS_",
        populate_by_name=True,
    )

    google_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("MODELS_GOOGLE_API_KEY", "GOOGLE_API_KEY"),
        description="Google Generative AI API key",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID (must match the index dimension)",
    )
    chat_model: str = Field(default="gemini-2.5-flash", description="Chat model ID")
    temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    answer_language: str = Field(
        default="English",
        description="Language the assistant answers in",
    )

"""
Unified application settings.

Aggregates all configuration modules into a single Settings object that is
built once per process and handed to components explicitly.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache
from typing import Iterable

from pydantic import Field

from pdf_agent.configs.base import BaseSettings
from pdf_agent.configs.models import ModelSettings
from pdf_agent.configs.s3_documents import S3DocumentsSettings
from pdf_agent.configs.vector_store import VectorStoreSettings
from pdf_agent.core.document_processing.configs import DocumentPipelineSettings
from pdf_agent.core.exceptions import MissingConfigurationError

# Dotted setting paths each entry point needs before touching the network
INGESTION_REQUIRED = (
    "models.google_api_key",
    "vector_store.vectors_bucket",
    "vector_store.index_name",
)
QUERY_REQUIRED = INGESTION_REQUIRED
UPLOAD_REQUIRED = ("s3_documents.bucket",)


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    s3_documents: S3DocumentsSettings = Field(default_factory=S3DocumentsSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    models: ModelSettings = Field(default_factory=ModelSettings)
    pipeline: DocumentPipelineSettings = Field(default_factory=DocumentPipelineSettings)

    def validate_required(self, required: Iterable[str]) -> None:
        """
        Check that every required setting has a non-empty value.

        Args:
            required: Dotted paths such as "vector_store.index_name"

        Raises:
            MissingConfigurationError: Listing the environment variable of each missing setting
        """
        missing = []
        for path in required:
            section_name, field_name = path.split(".", 1)
            section = getattr(self, section_name)
            if not getattr(section, field_name):
                prefix = section.model_config.get("env_prefix", "")
                missing.append(f"{prefix}{field_name}".upper())

        if missing:
            raise MissingConfigurationError(missing)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once per Lambda container.

    Returns:
        Settings: Application settings instance
    """
    return Settings()

"""
Configuration settings for document processing pipeline.

Provides environment-based configuration for chunking, embedding batches,
retries, index upserts and source cleanup.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pdf_agent.core.exceptions import InvalidConfigurationError


class DocumentPipelineSettings(BaseSettings):
    """Settings for document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings (characters, not tokens)
    chunk_size: int = Field(
        default=1000,
        description="Window size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        description="Overlap between consecutive windows in characters",
    )

    # Embedding settings
    embedding_batch_size: int = Field(
        default=64,
        gt=0,
        description="Maximum chunks per embedding provider call",
    )
    max_retries: int = Field(
        default=5,
        gt=0,
        description="Maximum embedding attempts per batch (429/5xx only)",
    )

    # Index settings
    upsert_batch_size: int = Field(
        default=100,
        gt=0,
        le=500,
        description="Maximum records per index upsert call (S3 Vectors allows 500)",
    )

    # Eligibility
    key_prefix: str = Field(
        default="uploads/",
        description="Only keys under this prefix are ingested",
    )
    key_suffix: str = Field(
        default=".pdf",
        description="Only keys with this suffix are ingested",
    )

    # Source lifecycle
    delete_source_after_ingest: bool = Field(
        default=True,
        description="Delete the source PDF once its vectors are upserted",
    )
    cleanup_failure_fatal: bool = Field(
        default=False,
        description="Raise instead of warn when source deletion fails",
    )

    @model_validator(mode="after")
    def validate_window(self) -> "DocumentPipelineSettings":
        """Window must be positive and overlap smaller, otherwise windows never advance."""
        if self.chunk_size <= 0:
            raise InvalidConfigurationError(
                f"chunk_size must be positive, got {self.chunk_size}",
                setting="chunk_size",
            )
        if not 0 <= self.chunk_overlap < self.chunk_size:
            raise InvalidConfigurationError(
                f"chunk_overlap ({self.chunk_overlap}) must be in [0, chunk_size={self.chunk_size})",
                setting="chunk_overlap",
            )
        return self

    def is_eligible(self, key: str) -> bool:
        """Return True when the object key should be ingested."""
        return key.startswith(self.key_prefix) and key.endswith(self.key_suffix)

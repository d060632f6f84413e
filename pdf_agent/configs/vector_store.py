"""
Vector store configuration settings.

Manages S3 Vectors bucket and index configuration for storage and retrieval.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG ingestion and retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from pdf_agent.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """
    S3 Vectors configuration.

    The index named by index_name must declare the "text" metadata key as
    non-filterable (see pdf_agent.boundary.vdb.NON_FILTERABLE_METADATA_KEYS).
    """

    model_config = SettingsConfigDict(env_prefix="VECTOR_STORE_")

    vectors_bucket: str = Field(default="", description="S3 Vectors bucket name")
    index_name: str = Field(default="", description="S3 Vectors index name")
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    dimension: int = Field(
        default=1536,
        gt=0,
        description="Embedding dimension configured on the index",
    )
    top_k: int = Field(default=5, ge=1, le=100, description="Default number of matches")

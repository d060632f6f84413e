"""
S3 Documents bucket configuration.

Settings for raw PDF storage and presigned upload URL generation.

Dependencies: pydantic_settings
System role: S3 documents bucket configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from pdf_agent.configs.base import BaseSettings


class S3DocumentsSettings(BaseSettings):
    """Settings for S3 documents bucket operations."""

    model_config = SettingsConfigDict(env_prefix="S3_DOCUMENTS_")

    bucket: str = Field(
        default="",
        description="S3 bucket receiving uploaded PDFs",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for S3 bucket",
    )
    upload_prefix: str = Field(
        default="uploads/",
        description="Key prefix for uploaded documents",
    )
    presigned_url_expiry: int = Field(
        default=900,
        gt=0,
        description="Presigned upload URL expiry in seconds (default 15 minutes)",
    )

"""
Configuration package.

Exports: Settings, get_settings and the per-concern settings classes
"""

from pdf_agent.configs.models import ModelSettings
from pdf_agent.configs.s3_documents import S3DocumentsSettings
from pdf_agent.configs.settings import (
    INGESTION_REQUIRED,
    QUERY_REQUIRED,
    UPLOAD_REQUIRED,
    Settings,
    get_settings,
)
from pdf_agent.configs.vector_store import VectorStoreSettings

__all__ = [
    "INGESTION_REQUIRED",
    "QUERY_REQUIRED",
    "UPLOAD_REQUIRED",
    "ModelSettings",
    "S3DocumentsSettings",
    "Settings",
    "VectorStoreSettings",
    "get_settings",
]

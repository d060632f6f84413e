"""
Document processing pipeline for ingestion.

Self-contained Lambda-ready module for fetching, extracting, chunking,
embedding and indexing documents.

Dependencies: boto3, langchain_community, langchain_google_genai, pydantic, tenacity
System role: Document ingestion pipeline entrypoint
"""

from .configs import DocumentPipelineSettings
from .entrypoint import DocumentPipeline
from .models import Chunk, DocumentNotification, IngestionResult, IngestionState

__all__ = [
    "Chunk",
    "DocumentNotification",
    "DocumentPipeline",
    "DocumentPipelineSettings",
    "IngestionResult",
    "IngestionState",
]

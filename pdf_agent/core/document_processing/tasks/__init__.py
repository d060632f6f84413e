"""
Task modules for document processing pipeline.

Exports: S3DownloadTask, ParsingTask, ChunkingTask, EmbeddingTask, VectorStoreTask, CleanupTask
"""

from .chunking_task import ChunkingTask, split_text
from .cleanup_task import CleanupTask
from .embedding_task import EmbeddingTask, is_retryable, provider_status
from .parsing_task import ParsingTask
from .s3_download_task import S3DownloadTask
from .vector_store_task import VectorStoreTask

__all__ = [
    "ChunkingTask",
    "CleanupTask",
    "EmbeddingTask",
    "ParsingTask",
    "S3DownloadTask",
    "VectorStoreTask",
    "is_retryable",
    "provider_status",
    "split_text",
]

"""
Models for document processing pipeline.

Exports: Chunk, DocumentNotification, IngestionResult, IngestionState
"""

from .chunk import Chunk
from .pipeline_result import IngestionResult, IngestionState
from .s3_event import DocumentNotification

__all__ = [
    "Chunk",
    "DocumentNotification",
    "IngestionResult",
    "IngestionState",
]

"""
Pipeline result model for document processing.

Dependencies: pydantic
System role: Return type for DocumentPipeline.process()
"""

from enum import Enum

from pydantic import BaseModel, Field


class IngestionState(str, Enum):
    """Per-document ingestion states, in pipeline order, plus terminal outcomes."""

    FETCHED = "fetched"
    TEXT_EXTRACTED = "text_extracted"
    CHUNKED = "chunked"
    EMBEDDED = "embedded"
    UPSERTED = "upserted"
    CLEANED = "cleaned"
    SKIPPED = "skipped"
    FAILED = "failed"


class IngestionResult(BaseModel):
    """Result of document processing pipeline execution."""

    key: str = Field(description="Object key of the document")
    state: IngestionState = Field(description="Terminal state reached")
    chunk_count: int = Field(default=0, description="Windows produced by the chunker")
    record_count: int = Field(default=0, description="Embedding records produced")
    upserted_count: int = Field(default=0, description="Records written to the index")
    deleted_source: bool = Field(default=False, description="Source object was deleted")
    cleanup_error: str | None = Field(default=None, description="Source deletion failure, if any")
    skipped_reason: str | None = Field(default=None, description="Why the document was a no-op")
    processing_time_ms: float = Field(default=0.0, description="Total processing time in milliseconds")

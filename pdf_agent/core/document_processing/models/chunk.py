"""
Chunk domain model for document processing pipeline.

Dependencies: pydantic
System role: Overlapping text window produced by the chunker
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Contiguous window of a document's extracted text."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Window text")
    index: int = Field(ge=0, description="Zero-based position in the document's chunk sequence")

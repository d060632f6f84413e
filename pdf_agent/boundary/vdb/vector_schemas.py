"""
Vector database schemas.

Pydantic models for records written to the index and matches read back.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, ConfigDict, Field

# Keys the index must declare in nonFilterableMetadataKeys. Filterable
# metadata is capped at 2 KB per vector, which a 1000-character window of
# non-ASCII text can exceed.
NON_FILTERABLE_METADATA_KEYS = ("text",)


class RecordMetadata(BaseModel):
    """
    Metadata attached to each vector.

    `text` is stored for retrieval only and must be non-filterable on the index.
    """

    filename: str = Field(description="Source object key")
    chunk_index: int = Field(ge=0, description="Position of the chunk in its document")
    text: str = Field(description="Chunk text used as retrieval context")
    source_url: str = Field(description="s3://bucket/key of the source document")


class EmbeddingRecord(BaseModel):
    """Unit persisted to the vector index. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic id: <document prefix>-<chunk index>")
    vector: list[float] = Field(description="Embedding vector")
    metadata: RecordMetadata


class RetrievalMatch(BaseModel):
    """Single match returned by a similarity query."""

    id: str = Field(description="Record id")
    score: float | None = Field(default=None, description="Score as reported by the index")
    filename: str | None = None
    chunk_index: int | None = None
    source_url: str | None = None
    text: str | None = Field(default=None, description="Chunk text, None for legacy records")

    def citation(self) -> dict:
        """Fields returned to API callers (text is omitted)."""
        return self.model_dump(exclude={"text"})

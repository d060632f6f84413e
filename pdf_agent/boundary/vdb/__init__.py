"""
Vector database boundary.

Exports: NON_FILTERABLE_METADATA_KEYS, VectorStoreClient, EmbeddingRecord, RecordMetadata, RetrievalMatch,
FixedDimensionEmbeddings, build_embeddings
"""

from .embeddings_wrapper import FixedDimensionEmbeddings, build_embeddings
from .vector_schemas import (
    NON_FILTERABLE_METADATA_KEYS,
    EmbeddingRecord,
    RecordMetadata,
    RetrievalMatch,
)
from .vector_store_client import VectorStoreClient

__all__ = [
    "NON_FILTERABLE_METADATA_KEYS",
    "EmbeddingRecord",
    "FixedDimensionEmbeddings",
    "RecordMetadata",
    "RetrievalMatch",
    "VectorStoreClient",
    "build_embeddings",
]

"""
S3 Vectors upsert task.

Writes embedding records in consecutive bounded batches. A failed batch
aborts the document; batches already written stay in the index, and a
re-run overwrites them under the same ids.

Dependencies: pdf_agent.boundary.vdb
System role: Index-writing stage of document ingestion pipeline
"""

import logging
from typing import Sequence

from pdf_agent.boundary.vdb import EmbeddingRecord, VectorStoreClient
from pdf_agent.core.exceptions import InvalidConfigurationError, ProviderError

logger = logging.getLogger(__name__)


class VectorStoreTask:
    """Upsert embedding records into the vector index."""

    def __init__(self, vector_client: VectorStoreClient, batch_size: int = 100) -> None:
        """
        Initialize vector store task.

        Args:
            vector_client: S3 Vectors client
            batch_size: Maximum records per upsert call

        Raises:
            InvalidConfigurationError: When batch_size is not positive
        """
        if batch_size <= 0:
            raise InvalidConfigurationError("batch_size must be positive", setting="batch_size")
        self._vector_client = vector_client
        self._batch_size = batch_size

    def upsert(self, records: Sequence[EmbeddingRecord], key: str | None = None) -> int:
        """
        Upsert records batch by batch.

        Args:
            records: Records in chunk order
            key: Document key, for logging

        Returns:
            int: Number of records written

        Raises:
            ProviderError: When any batch fails (carries the failing batch number)
        """
        written = 0
        total_batches = (len(records) + self._batch_size - 1) // self._batch_size

        for batch_number, start in enumerate(range(0, len(records), self._batch_size), 1):
            batch = list(records[start:start + self._batch_size])
            try:
                self._vector_client.put_vectors(batch)
            except ProviderError as e:
                e.details.update({"batch": batch_number, "written": written})
                logger.error(
                    "upsert - Batch %d/%d failed for %s: %s",
                    batch_number,
                    total_batches,
                    key,
                    e.message,
                )
                raise

            written += len(batch)
            logger.info(
                "upsert - Upserted batch %d/%d of %s (%d vectors)",
                batch_number,
                total_batches,
                key,
                len(batch),
            )

        return written

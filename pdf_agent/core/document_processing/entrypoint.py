"""
Document pipeline orchestrator.

Coordinates S3 fetch, text extraction, chunking, embedding, index upsert and
source cleanup for one document:

    FETCHED -> TEXT_EXTRACTED -> CHUNKED -> EMBEDDED -> UPSERTED -> CLEANED

Ineligible keys, empty bodies, text-less PDFs and documents with no
embeddable chunks end as SKIPPED. Any other failure is logged as FAILED and
propagated; the pipeline never retries a whole document.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from typing import Iterable

from pdf_agent.core.exceptions import StorageError
from pdf_agent.observability.log_utils import log_with_context

from .configs import DocumentPipelineSettings
from .models import DocumentNotification, IngestionResult, IngestionState
from .tasks import (
    ChunkingTask,
    CleanupTask,
    EmbeddingTask,
    ParsingTask,
    S3DownloadTask,
    VectorStoreTask,
)

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: fetch -> extract -> chunk -> embed -> upsert -> cleanup."""

    def __init__(
        self,
        settings: DocumentPipelineSettings,
        download_task: S3DownloadTask,
        parsing_task: ParsingTask,
        embedding_task: EmbeddingTask,
        vector_store_task: VectorStoreTask,
        cleanup_task: CleanupTask,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            settings: Pipeline settings (window, eligibility, cleanup policy)
            download_task: Fetches source payloads
            parsing_task: Extracts text from payloads
            embedding_task: Embeds chunks into records
            vector_store_task: Writes records to the index
            cleanup_task: Deletes source documents

        Raises:
            InvalidConfigurationError: Invalid chunk window configuration
        """
        self._settings = settings
        self._download_task = download_task
        self._parsing_task = parsing_task
        self._chunking_task = ChunkingTask(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
        )
        self._embedding_task = embedding_task
        self._vector_store_task = vector_store_task
        self._cleanup_task = cleanup_task

    def process(self, notification: DocumentNotification) -> IngestionResult:
        """
        Process one document through the full pipeline.

        Args:
            notification: Bucket and key of the uploaded document

        Returns:
            IngestionResult: Terminal state and counts

        Raises:
            StorageError: Fetch failed, or cleanup failed with cleanup_failure_fatal set
            ParsingError: Text extraction failed
            ProviderError: Embedding or upsert failed
        """
        start_time = time.perf_counter()
        key = notification.key
        result = IngestionResult(key=key, state=IngestionState.SKIPPED)

        if not self._settings.is_eligible(key):
            logger.info("process - Skipping ineligible key: %s", key)
            return self._finish(result, start_time, skipped_reason="ineligible key")

        logger.info("process - Processing file: %s/%s", notification.bucket, key)
        state = None
        try:
            payload = self._download_task.download(notification.bucket, key)
            state = IngestionState.FETCHED
            if not payload:
                logger.warning("process - S3 object body is empty for %s", key)
                return self._finish(result, start_time, skipped_reason="empty object body")

            text = self._parsing_task.extract(payload, filename=key)
            state = IngestionState.TEXT_EXTRACTED
            if not text.strip():
                logger.warning("process - No text extracted from PDF: %s", key)
                return self._finish(result, start_time, skipped_reason="no extractable text")
            logger.info("process - Extracted %d characters from %s", len(text), key)

            chunks = self._chunking_task.chunk(text)
            state = IngestionState.CHUNKED
            result.chunk_count = len(chunks)
            logger.info("process - Split text into %d chunks", len(chunks))

            records = self._embedding_task.embed_all(
                chunks,
                id_prefix=notification.id_prefix,
                filename=key,
                source_url=notification.source_url,
            )
            state = IngestionState.EMBEDDED
            result.record_count = len(records)
            if not records:
                logger.warning("process - No vectors generated for %s, skipping upsert", key)
                return self._finish(result, start_time, skipped_reason="no embeddable chunks")
            logger.info("process - Generated %d embeddings", len(records))

            result.upserted_count = self._vector_store_task.upsert(records, key=key)
            state = IngestionState.UPSERTED
            result.state = IngestionState.UPSERTED

        except Exception as e:
            log_with_context(
                logger,
                logging.ERROR,
                f"process - Ingestion failed for {key}",
                key=key,
                state=IngestionState.FAILED.value,
                last_state=state.value if state else None,
                error_type=type(e).__name__,
                error_msg=str(e),
            )
            raise

        if self._settings.delete_source_after_ingest:
            self._cleanup(notification, result)

        return self._finish(result, start_time)

    def _cleanup(self, notification: DocumentNotification, result: IngestionResult) -> None:
        try:
            self._cleanup_task.delete(notification.bucket, notification.key)
        except StorageError as e:
            if self._settings.cleanup_failure_fatal:
                logger.error("_cleanup - Failed to delete %s: %s", notification.key, e.message)
                raise
            # Vectors are already durable; report the leftover source instead of failing
            logger.warning(
                "_cleanup - Source %s left in place, delete failed: %s",
                notification.key,
                e.message,
            )
            result.cleanup_error = e.message
            return

        result.deleted_source = True
        result.state = IngestionState.CLEANED
        logger.info("_cleanup - Deleted original PDF from S3: %s", notification.key)

    def _finish(
        self,
        result: IngestionResult,
        start_time: float,
        skipped_reason: str | None = None,
    ) -> IngestionResult:
        if skipped_reason:
            result.state = IngestionState.SKIPPED
            result.skipped_reason = skipped_reason
        result.processing_time_ms = (time.perf_counter() - start_time) * 1000
        return result

    def process_batch(self, notifications: Iterable[DocumentNotification]) -> list[IngestionResult]:
        """
        Process documents sequentially; the first failure stops the batch.

        Args:
            notifications: Documents in arrival order

        Returns:
            list[IngestionResult]: Results for each document
        """
        return [self.process(notification) for notification in notifications]

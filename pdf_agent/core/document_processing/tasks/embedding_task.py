"""
Batched embedding generation with retry on rate limits and server errors.

Chunks are embedded in consecutive batches, one provider round trip per
batch. Blank chunks are dropped before the call but keep their position, so
record ids depend only on the chunk index.

Retry policy (tenacity): only HTTP 429 and 5xx are retried, with
delay = min(2**attempt + uniform(0, 0.25), 8) seconds, attempt counted from
0, and at most `max_retries` attempts in total. Anything else fails the
document immediately.

Dependencies: langchain_core, tenacity
System role: Embedding stage of document ingestion pipeline
"""

import logging
import time
from typing import Any, Callable, Sequence

from langchain_core.embeddings import Embeddings
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from pdf_agent.boundary.vdb.vector_schemas import EmbeddingRecord, RecordMetadata
from pdf_agent.core.exceptions import (
    InvalidConfigurationError,
    PdfAgentError,
    PermanentProviderError,
    TransientProviderError,
)

from ..models import Chunk

logger = logging.getLogger(__name__)

BASE_DELAY_SECONDS = 1.0
MAX_DELAY_SECONDS = 8.0
JITTER_SECONDS = 0.25


def provider_status(error: BaseException) -> int | None:
    """
    Find the HTTP status code behind a provider exception.

    SDKs expose it as `status_code`, `code` or `response.status_code`, and
    LangChain integrations often wrap the SDK error, so the cause chain is
    searched as well.
    """
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        for attr in ("status_code", "code"):
            value = getattr(current, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        response_status = getattr(getattr(current, "response", None), "status_code", None)
        if isinstance(response_status, int):
            return response_status
        current = current.__cause__ or current.__context__
    return None


def is_retryable(error: BaseException) -> bool:
    """True for rate-limit (429) and server-side (5xx) failures."""
    status = provider_status(error)
    if status is None:
        return False
    return status == 429 or 500 <= status < 600


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.warning(
        "embed - Retry %d after %.0fms due to status %s",
        retry_state.attempt_number,
        delay * 1000,
        provider_status(error) if error else "unknown",
    )


class EmbeddingTask:
    """Turn chunks into embedding records with batching and bounded retries."""

    def __init__(
        self,
        embeddings: Embeddings,
        batch_size: int = 64,
        max_retries: int = 5,
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            embeddings: LangChain embeddings provider
            batch_size: Maximum chunks per provider call
            max_retries: Maximum attempts per provider call (429/5xx only)
            sleep: Sleep function used between attempts

        Raises:
            InvalidConfigurationError: Non-positive batch_size or max_retries
        """
        if batch_size <= 0:
            raise InvalidConfigurationError("batch_size must be positive", setting="batch_size")
        if max_retries <= 0:
            raise InvalidConfigurationError("max_retries must be positive", setting="max_retries")

        self._embeddings = embeddings
        self._batch_size = batch_size
        self._max_retries = max_retries
        self._retrying = Retrying(
            stop=stop_after_attempt(max_retries),
            wait=wait_exponential_jitter(
                initial=BASE_DELAY_SECONDS,
                max=MAX_DELAY_SECONDS,
                exp_base=2,
                jitter=JITTER_SECONDS,
            ),
            retry=retry_if_exception(is_retryable),
            before_sleep=_log_retry,
            sleep=sleep,
            reraise=True,
        )

    def _call_with_retry(self, call: Callable[..., Any], payload: Any, batch_number: int) -> Any:
        try:
            return self._retrying(call, payload)
        except PdfAgentError:
            raise
        except Exception as e:
            status = provider_status(e)
            details = {"batch": batch_number}
            if is_retryable(e):
                raise TransientProviderError(
                    f"Embedding provider still failing after {self._max_retries} attempts: {e}",
                    status_code=status,
                    details=details,
                ) from e
            raise PermanentProviderError(
                f"Embedding provider rejected the request: {e}",
                status_code=status,
                details=details,
            ) from e

    def embed_all(
        self,
        chunks: Sequence[Chunk],
        id_prefix: str,
        filename: str,
        source_url: str,
    ) -> list[EmbeddingRecord]:
        """
        Embed chunks and build records in chunk order.

        Args:
            chunks: Chunks in document order
            id_prefix: Document-scoped prefix for record ids
            filename: Source key stored in metadata
            source_url: s3:// URI stored in metadata

        Returns:
            list[EmbeddingRecord]: One record per non-blank chunk, ordered by chunk index

        Raises:
            TransientProviderError: 429/5xx persisted through every attempt
            PermanentProviderError: Any other provider failure
        """
        records: list[EmbeddingRecord] = []
        total_batches = (len(chunks) + self._batch_size - 1) // self._batch_size

        for batch_number, start in enumerate(range(0, len(chunks), self._batch_size), 1):
            batch = [
                (chunk.index, chunk.text.strip())
                for chunk in chunks[start:start + self._batch_size]
            ]
            non_empty = [(index, text) for index, text in batch if text]
            if not non_empty:
                logger.info("embed_all - Skipping blank batch %d/%d", batch_number, total_batches)
                continue

            inputs = [text for _, text in non_empty]
            vectors = self._call_with_retry(self._embeddings.embed_documents, inputs, batch_number)
            if len(vectors) != len(inputs):
                raise PermanentProviderError(
                    f"Embedding provider returned {len(vectors)} vectors for {len(inputs)} inputs",
                    details={"batch": batch_number},
                )

            for (index, text), vector in zip(non_empty, vectors):
                records.append(
                    EmbeddingRecord(
                        id=f"{id_prefix}-{index}",
                        vector=vector,
                        metadata=RecordMetadata(
                            filename=filename,
                            chunk_index=index,
                            text=text,
                            source_url=source_url,
                        ),
                    )
                )

            logger.info(
                "embed_all - Embedded batch %d/%d (%d inputs)",
                batch_number,
                total_batches,
                len(inputs),
            )

        return records

    def embed_query(self, text: str) -> list[float]:
        """
        Embed a single query string with the ingestion model and retry policy.

        Raises:
            TransientProviderError: 429/5xx persisted through every attempt
            PermanentProviderError: Any other provider failure
        """
        return self._call_with_retry(self._embeddings.embed_query, text, batch_number=1)

"""
S3 Vectors client wrapper.

Writes embedding records with put_vectors (overwrite-by-key, so repeated
writes of the same ids are idempotent) and runs similarity queries.

Dependencies: boto3, pdf_agent.core.exceptions
System role: Vector index collaborator for ingestion and query
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from pdf_agent.boundary.vdb.vector_schemas import EmbeddingRecord, RetrievalMatch
from pdf_agent.core.exceptions import PermanentProviderError

logger = logging.getLogger(__name__)


def client_error_status(error: ClientError) -> int | None:
    """Return the HTTP status code carried by a botocore ClientError."""
    return error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")


class VectorStoreClient:
    """
    S3 Vectors client for vector operations.

    Provides methods for writing records and querying by similarity.
    A query may target another index of the same bucket (namespace).

    Each target index must be created with NON_FILTERABLE_METADATA_KEYS
    ("text") as non-filterable metadata, otherwise chunk text counts against
    the 2 KB filterable-metadata limit and put_vectors rejects long windows.
    """

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str,
        region: str = "us-east-1",
        client: Any | None = None,
    ) -> None:
        """
        Initialize S3 Vectors client.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Default index name within the bucket
            region: AWS region for S3 Vectors
            client: Pre-built boto3 s3vectors client (tests pass a stub)
        """
        self.vectors_bucket = vectors_bucket
        self.index_name = index_name
        self.client = client or boto3.client("s3vectors", region_name=region)

    def put_vectors(self, records: list[EmbeddingRecord], index_name: str | None = None) -> None:
        """
        Write records in a single put_vectors call.

        Args:
            records: Records to write (caller enforces the batch limit)
            index_name: Index override, defaults to the configured index

        Raises:
            PermanentProviderError: If the write fails
        """
        entries = [
            {
                "key": record.id,
                "data": {"float32": record.vector},
                "metadata": record.metadata.model_dump(mode="json"),
            }
            for record in records
        ]
        try:
            self.client.put_vectors(
                vectorBucketName=self.vectors_bucket,
                indexName=index_name or self.index_name,
                vectors=entries,
            )
        except ClientError as e:
            raise PermanentProviderError(
                f"Failed to put vectors to S3 Vectors: {e}",
                status_code=client_error_status(e),
                details={"operation": "put_vectors", "vector_count": len(records)},
            ) from e
        except BotoCoreError as e:
            raise PermanentProviderError(
                f"Failed to put vectors to S3 Vectors: {e}",
                details={"operation": "put_vectors", "vector_count": len(records)},
            ) from e

    def query_vectors(
        self,
        vector: list[float],
        top_k: int,
        index_name: str | None = None,
    ) -> list[RetrievalMatch]:
        """
        Query nearest records by similarity.

        Args:
            vector: Query embedding
            top_k: Maximum number of matches
            index_name: Index override (namespace), defaults to the configured index

        Returns:
            list[RetrievalMatch]: Matches in rank order (distance ascending)

        Raises:
            PermanentProviderError: If the query fails
        """
        try:
            response = self.client.query_vectors(
                vectorBucketName=self.vectors_bucket,
                indexName=index_name or self.index_name,
                topK=top_k,
                queryVector={"float32": vector},
                returnMetadata=True,
                returnDistance=True,
            )
        except ClientError as e:
            raise PermanentProviderError(
                f"Failed to query S3 Vectors: {e}",
                status_code=client_error_status(e),
                details={"operation": "query_vectors", "top_k": top_k},
            ) from e
        except BotoCoreError as e:
            raise PermanentProviderError(
                f"Failed to query S3 Vectors: {e}",
                details={"operation": "query_vectors", "top_k": top_k},
            ) from e

        matches = []
        for item in response.get("vectors", []):
            metadata = item.get("metadata") or {}
            matches.append(
                RetrievalMatch(
                    id=item["key"],
                    score=item.get("distance"),
                    filename=metadata.get("filename"),
                    chunk_index=metadata.get("chunk_index"),
                    source_url=metadata.get("source_url"),
                    text=metadata.get("text"),
                )
            )

        logger.info(
            "query_vectors - Retrieved matches",
            extra={"match_count": len(matches), "top_k": top_k},
        )
        return matches

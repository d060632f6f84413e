"""
S3 document fetch task.

Reads an uploaded document from S3 into memory.

Dependencies: botocore, pdf_agent.boundary.aws
System role: First stage of document ingestion pipeline (S3 source)
"""

from botocore.exceptions import BotoCoreError, ClientError

from pdf_agent.boundary.aws import S3DocumentClient
from pdf_agent.core.exceptions import StorageError


class S3DownloadTask:
    """Fetch document payloads from S3."""

    def __init__(self, s3_client: S3DocumentClient) -> None:
        self._s3_client = s3_client

    def download(self, bucket: str, key: str) -> bytes:
        """
        Download document payload.

        Args:
            bucket: Bucket name from the notification
            key: S3 object key (e.g., "uploads/<uuid>-file.pdf")

        Returns:
            bytes: Document payload

        Raises:
            StorageError: When the fetch fails
        """
        if not key:
            raise StorageError("S3 key is required", bucket=bucket, operation="get")

        try:
            return self._s3_client.get_object(bucket, key)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in ("404", "NoSuchKey"):
                raise StorageError(
                    f"File not found in S3: {key}", bucket=bucket, key=key, operation="get"
                ) from e
            raise StorageError(
                f"Failed to download from S3: {e}", bucket=bucket, key=key, operation="get"
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                f"Unexpected error downloading from S3: {e}",
                bucket=bucket,
                key=key,
                operation="get",
            ) from e

"""
Source cleanup task.

Deletes the uploaded PDF once its vectors are durably indexed.

Dependencies: botocore, pdf_agent.boundary.aws
System role: Final stage of document ingestion pipeline
"""

from botocore.exceptions import BotoCoreError, ClientError

from pdf_agent.boundary.aws import S3DocumentClient
from pdf_agent.core.exceptions import StorageError


class CleanupTask:
    """Delete source documents from S3."""

    def __init__(self, s3_client: S3DocumentClient) -> None:
        self._s3_client = s3_client

    def delete(self, bucket: str, key: str) -> None:
        """
        Delete the source document.

        Raises:
            StorageError: When deletion fails
        """
        try:
            self._s3_client.delete_object(bucket, key)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Failed to delete source document: {e}",
                bucket=bucket,
                key=key,
                operation="delete",
            ) from e

"""
S3 client for document bucket operations.

Fetches and deletes uploaded PDFs and generates presigned upload URLs.
Errors are raised as botocore ClientError; pipeline tasks wrap them.

Dependencies: boto3
System role: Storage collaborator for ingestion and upload handlers
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import boto3


class S3DocumentClient:
    """S3 client for document bucket operations."""

    def __init__(self, region: str = "us-east-1", client: Any | None = None) -> None:
        """
        Initialize S3 client.

        Args:
            region: AWS region for the documents bucket
            client: Pre-built boto3 S3 client (tests pass a stub)
        """
        self._region = region
        self._s3_client = client or boto3.client("s3", region_name=region)

    def get_object(self, bucket: str, key: str) -> bytes:
        """
        Read an object fully into memory.

        Args:
            bucket: Bucket name
            key: Object key

        Returns:
            bytes: Object payload (empty when the object has no body)

        Raises:
            ClientError: If the object cannot be read
        """
        response = self._s3_client.get_object(Bucket=bucket, Key=key)
        body = response.get("Body")
        if body is None:
            return b""
        return body.read()

    def delete_object(self, bucket: str, key: str) -> None:
        """
        Delete an object.

        Raises:
            ClientError: If deletion fails
        """
        self._s3_client.delete_object(Bucket=bucket, Key=key)

    def generate_presigned_url(
        self,
        bucket: str,
        s3_key: str,
        content_type: str = "application/pdf",
        expires_in: int = 900,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for uploading a document.

        Args:
            bucket: Target bucket
            s3_key: S3 object key (path in bucket)
            content_type: MIME type of the file
            expires_in: URL expiry in seconds

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            ClientError: If presigned URL generation fails
        """
        presigned_url = self._s3_client.generate_presigned_url(
            ClientMethod="put_object",
            Params={
                "Bucket": bucket,
                "Key": s3_key,
                "ContentType": content_type,
            },
            ExpiresIn=expires_in,
        )
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at

"""
Presigned upload URL issuing.

Validates the requested filename and builds a unique key under the upload
prefix, so each upload triggers ingestion exactly once.

Dependencies: pdf_agent.boundary.aws, pydantic
System role: Upload request handling
"""

import logging
import re
import uuid

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, Field

from pdf_agent.boundary.aws import S3DocumentClient
from pdf_agent.core.exceptions import InvalidRequestError, StorageError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class UploadTicket(BaseModel):
    """Presigned URL response."""

    upload_url: str = Field(serialization_alias="uploadUrl")
    key: str
    bucket: str
    expires_in: int = Field(serialization_alias="expiresIn")


def safe_name(name: str) -> str:
    """Replace characters outside [A-Za-z0-9._-] with underscores."""
    return _UNSAFE_CHARS.sub("_", name)


def issue_upload_url(
    s3_client: S3DocumentClient,
    bucket: str,
    file_name: str | None = None,
    content_type: str | None = None,
    prefix: str = "uploads/",
    expires_in: int = 900,
) -> UploadTicket:
    """
    Generate a presigned PUT URL for a new PDF.

    Args:
        s3_client: Storage client
        bucket: Documents bucket
        file_name: Original filename (default "document.pdf")
        content_type: MIME type (default "application/pdf")
        prefix: Key prefix watched by ingestion
        expires_in: URL lifetime in seconds

    Returns:
        UploadTicket: URL, key, bucket and expiry

    Raises:
        InvalidRequestError: Filename is not a .pdf
        StorageError: URL generation failed
    """
    original_name = (file_name or "document.pdf").strip()
    mime_type = (content_type or "application/pdf").strip()

    if not original_name.lower().endswith(".pdf"):
        raise InvalidRequestError("Only .pdf files are supported", field="fileName")

    key = f"{prefix}{uuid.uuid4()}-{safe_name(original_name)}"
    try:
        upload_url, _ = s3_client.generate_presigned_url(
            bucket, key, content_type=mime_type, expires_in=expires_in
        )
    except (ClientError, BotoCoreError) as e:
        raise StorageError(
            f"Failed to generate presigned URL: {e}", bucket=bucket, key=key, operation="presign"
        ) from e

    logger.info("issue_upload_url - Issued upload URL", extra={"key": key})
    return UploadTicket(upload_url=upload_url, key=key, bucket=bucket, expires_in=expires_in)

"""
Storage notification schema for document processing.

A notification names the bucket and key of a newly uploaded object.
Derived values give the record id prefix and the source URL stored with
every vector.

Dependencies: pydantic
System role: Data validation and contract definition
"""

from pydantic import BaseModel, ConfigDict, Field


class DocumentNotification(BaseModel):
    """Object-created notification for one document."""

    bucket: str = Field(..., min_length=1, description="Bucket holding the document")
    key: str = Field(..., min_length=1, description="URL-decoded object key")
    size_bytes: int = Field(default=0, ge=0, description="Object size from the notification")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "bucket": "pdf-storage-bucket",
                "key": "uploads/0f8e1b2c-report.pdf",
                "size_bytes": 1024000,
            }
        }
    )

    @property
    def source_url(self) -> str:
        """URI stored in record metadata."""
        return f"s3://{self.bucket}/{self.key}"

    @property
    def id_prefix(self) -> str:
        """Document-scoped record id prefix, stable for a given key."""
        return self.key.replace("/", "_").replace(".", "-")

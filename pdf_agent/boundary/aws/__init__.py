"""AWS boundary clients."""

from .s3_client import S3DocumentClient

__all__ = ["S3DocumentClient"]

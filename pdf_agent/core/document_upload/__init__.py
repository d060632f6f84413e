"""Presigned upload URL issuing."""

from .upload_ticket import UploadTicket, issue_upload_url, safe_name

__all__ = ["UploadTicket", "issue_upload_url", "safe_name"]

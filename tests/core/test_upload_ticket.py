"""Tests for presigned upload URL issuing."""

import re
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from pdf_agent.core.document_upload import issue_upload_url, safe_name
from pdf_agent.core.exceptions import InvalidRequestError, StorageError


@pytest.fixture
def s3_client():
    client = MagicMock()
    client.generate_presigned_url.return_value = ("https://signed.example/put", None)
    return client


class TestSafeName:
    def test_replaces_unsafe_characters(self) -> None:
        assert safe_name("My Report (final).pdf") == "My_Report__final_.pdf"

    def test_keeps_allowed_characters(self) -> None:
        assert safe_name("a-b_c.1.pdf") == "a-b_c.1.pdf"


class TestIssueUploadUrl:
    """Key generation and validation."""

    def test_ticket_for_valid_pdf(self, s3_client) -> None:
        ticket = issue_upload_url(s3_client, bucket="docs", file_name="Q3 report.pdf")

        assert re.fullmatch(r"uploads/[0-9a-f-]{36}-Q3_report\.pdf", ticket.key)
        assert ticket.bucket == "docs"
        assert ticket.expires_in == 900
        assert ticket.upload_url == "https://signed.example/put"
        s3_client.generate_presigned_url.assert_called_once_with(
            "docs", ticket.key, content_type="application/pdf", expires_in=900
        )

    def test_defaults(self, s3_client) -> None:
        ticket = issue_upload_url(s3_client, bucket="docs")

        assert ticket.key.endswith("-document.pdf")

    def test_extension_check_is_case_insensitive(self, s3_client) -> None:
        ticket = issue_upload_url(s3_client, bucket="docs", file_name="SCAN.PDF")

        assert ticket.key.endswith("-SCAN.PDF")

    def test_keys_are_unique(self, s3_client) -> None:
        first = issue_upload_url(s3_client, bucket="docs", file_name="a.pdf")
        second = issue_upload_url(s3_client, bucket="docs", file_name="a.pdf")

        assert first.key != second.key

    def test_non_pdf_rejected(self, s3_client) -> None:
        with pytest.raises(InvalidRequestError):
            issue_upload_url(s3_client, bucket="docs", file_name="notes.docx")

        s3_client.generate_presigned_url.assert_not_called()

    def test_serialized_with_api_names(self, s3_client) -> None:
        payload = issue_upload_url(s3_client, bucket="docs", file_name="a.pdf").model_dump(by_alias=True)

        assert set(payload) == {"uploadUrl", "key", "bucket", "expiresIn"}

    def test_presign_failure_raises_storage_error(self, s3_client) -> None:
        s3_client.generate_presigned_url.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied"}}, "PutObject"
        )

        with pytest.raises(StorageError):
            issue_upload_url(s3_client, bucket="docs", file_name="a.pdf")

"""Tests for S3 and SQS-wrapped notification parsing."""

import json

import pytest

from pdf_agent.core.document_processing.lambda_utils.event_parser import (
    parse_notifications,
    parse_record,
)
from pdf_agent.core.exceptions import EventParseError


def _s3_record(key: str, bucket: str = "pdf-bucket", size: int = 1024) -> dict:
    return {
        "eventSource": "aws:s3",
        "eventName": "ObjectCreated:Put",
        "s3": {"bucket": {"name": bucket}, "object": {"key": key, "size": size}},
    }


class TestParseRecord:
    """Single-record parsing."""

    def test_direct_s3_record(self) -> None:
        notifications = parse_record(_s3_record("uploads/a.pdf"))

        assert len(notifications) == 1
        assert notifications[0].bucket == "pdf-bucket"
        assert notifications[0].key == "uploads/a.pdf"
        assert notifications[0].size_bytes == 1024

    def test_key_is_url_decoded(self) -> None:
        notification = parse_record(_s3_record("uploads/my+annual+report%281%29.pdf"))[0]

        assert notification.key == "uploads/my annual report(1).pdf"

    def test_sqs_wrapped_s3_event(self) -> None:
        body = json.dumps({"Records": [_s3_record("uploads/a.pdf"), _s3_record("uploads/b.pdf")]})

        notifications = parse_record({"messageId": "m-1", "body": body})

        assert [n.key for n in notifications] == ["uploads/a.pdf", "uploads/b.pdf"]

    def test_s3_test_event_ignored(self) -> None:
        body = json.dumps({"Service": "Amazon S3", "Event": "s3:TestEvent", "Bucket": "pdf-bucket"})

        assert parse_record({"messageId": "m-1", "body": body}) == []

    def test_invalid_json_body(self) -> None:
        with pytest.raises(EventParseError):
            parse_record({"messageId": "m-1", "body": "not json"})

    def test_record_without_s3_or_body(self) -> None:
        with pytest.raises(EventParseError):
            parse_record({"messageId": "m-1"})

    def test_missing_key(self) -> None:
        record = {"s3": {"bucket": {"name": "pdf-bucket"}, "object": {}}}

        with pytest.raises(EventParseError):
            parse_record(record)


class TestParseNotifications:
    def test_preserves_record_order(self) -> None:
        event = {"Records": [_s3_record("uploads/1.pdf"), _s3_record("uploads/2.pdf")]}

        assert [n.key for n in parse_notifications(event)] == ["uploads/1.pdf", "uploads/2.pdf"]

    def test_empty_event(self) -> None:
        assert parse_notifications({}) == []

    def test_derived_values(self) -> None:
        notification = parse_notifications({"Records": [_s3_record("uploads/x.y.pdf")]})[0]

        assert notification.source_url == "s3://pdf-bucket/uploads/x.y.pdf"
        assert notification.id_prefix == "uploads_x-y-pdf"

"""
S3 notification parsing utilities for Lambda.

Accepts S3 event records delivered directly to Lambda and S3 events
wrapped in SQS message bodies.
"""

import json
import logging
from typing import Any, Dict
from urllib.parse import unquote_plus

from pdf_agent.core.exceptions import EventParseError

from ..models import DocumentNotification

logger = logging.getLogger(__name__)


def _from_s3_record(s3_record: Dict[str, Any]) -> DocumentNotification:
    s3_info = s3_record.get("s3") or {}
    bucket = (s3_info.get("bucket") or {}).get("name", "")
    object_info = s3_info.get("object") or {}
    # Keys arrive URL-encoded with "+" for spaces
    key = unquote_plus(object_info.get("key", ""))

    if not bucket or not key:
        raise EventParseError(
            "S3 record is missing bucket name or object key",
            details={"bucket": bucket, "key": key},
        )

    return DocumentNotification(
        bucket=bucket,
        key=key,
        size_bytes=object_info.get("size", 0) or 0,
    )


def parse_record(record: Dict[str, Any]) -> list[DocumentNotification]:
    """
    Parse one Lambda record into document notifications.

    Args:
        record: S3 event record, or SQS record whose body is an S3 event

    Returns:
        list[DocumentNotification]: Parsed notifications (empty for S3 test events)

    Raises:
        EventParseError: Invalid record format
    """
    if "s3" in record:
        return [_from_s3_record(record)]

    body = record.get("body")
    if not body:
        raise EventParseError(
            "Record has neither an s3 section nor a message body",
            details={"message_id": record.get("messageId")},
        )

    try:
        s3_event = json.loads(body)
    except json.JSONDecodeError as e:
        logger.error("parse_record - JSONDecodeError: %s", e)
        raise EventParseError(f"Invalid JSON in message body: {e}") from e

    if s3_event.get("Event") == "s3:TestEvent":
        logger.info("parse_record - Ignoring S3 test event")
        return []

    s3_records = s3_event.get("Records", [s3_event])
    return [_from_s3_record(s3_record) for s3_record in s3_records]


def parse_notifications(event: Dict[str, Any]) -> list[DocumentNotification]:
    """
    Parse every record of a Lambda event, preserving order.

    Raises:
        EventParseError: Any record is malformed
    """
    notifications: list[DocumentNotification] = []
    for record in event.get("Records") or []:
        notifications.extend(parse_record(record))

    logger.info(
        "parse_notifications - Parsed notifications",
        extra={"record_count": len(notifications)},
    )
    return notifications

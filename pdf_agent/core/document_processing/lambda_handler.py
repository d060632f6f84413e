"""
Lambda handler for S3-triggered document processing.

Processes PDFs uploaded under the configured prefix:
fetch -> extract -> chunk -> embed -> upsert to S3 Vectors -> delete source.

Records are handled sequentially and the first failure aborts the
invocation, leaving the retry decision to the trigger. Re-running is safe
because record ids are deterministic.

Environment variables: see pdf_agent.configs (MODELS_*, VECTOR_STORE_*,
S3_DOCUMENTS_*, DOC_PIPELINE_*), LOG_LEVEL

Dependencies: lambda_utils, entrypoint
System role: Lambda entry point for document ingestion
"""

import json
import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

from pdf_agent.core.exceptions import DocumentProcessingError
from pdf_agent.observability.logger import configure_logging

from .entrypoint import DocumentPipeline
from .lambda_utils.config import build_pipeline, load_ingestion_settings
from .lambda_utils.event_parser import parse_notifications

# Load environment variables from .env if present
load_dotenv()
configure_logging(os.getenv("LOG_LEVEL", "INFO"))

logger = logging.getLogger(__name__)


def _get_pipeline() -> DocumentPipeline:
    # Built once per container, reused across invocations
    if not hasattr(handler, "_pipeline"):
        handler._pipeline = build_pipeline(load_ingestion_settings())
    return handler._pipeline


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for document-arrival notifications.

    Args:
        event: S3 event (or SQS event wrapping S3 events)
        context: Lambda context object

    Returns:
        Dict with statusCode and per-document results

    Raises:
        MissingConfigurationError: Required settings are absent
        EventParseError: A record is malformed
        DocumentProcessingError: A document failed; remaining records are not attempted
    """
    notifications = parse_notifications(event)
    logger.info("handler - Received event", extra={"record_count": len(notifications)})

    pipeline = _get_pipeline()
    results = []

    for notification in notifications:
        try:
            result = pipeline.process(notification)
        except Exception as e:
            logger.error(
                "handler - Error processing file %s: %s: %s",
                notification.key,
                type(e).__name__,
                e,
            )
            raise DocumentProcessingError(
                f"Error processing file {notification.key}: {e}",
                key=notification.key,
            ) from e

        results.append(result.model_dump(mode="json"))

    logger.info("handler - Processing complete", extra={"processed_count": len(results)})
    return {
        "statusCode": 200,
        "body": json.dumps(
            {
                "message": "PDFs processed successfully!",
                "processed": len(results),
                "results": results,
            }
        ),
    }

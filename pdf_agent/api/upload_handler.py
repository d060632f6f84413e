"""
Lambda handler issuing presigned upload URLs.

API Gateway proxy integration: POST {"fileName"?, "contentType"?} returns
{"uploadUrl", "key", "bucket", "expiresIn"}.

Environment variables: S3_DOCUMENTS_BUCKET, S3_DOCUMENTS_REGION,
S3_DOCUMENTS_UPLOAD_PREFIX, S3_DOCUMENTS_PRESIGNED_URL_EXPIRY, LOG_LEVEL
"""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

from pdf_agent.boundary.aws import S3DocumentClient
from pdf_agent.configs import UPLOAD_REQUIRED, Settings, get_settings
from pdf_agent.core.document_upload import issue_upload_url
from pdf_agent.core.exceptions import InvalidRequestError, MissingConfigurationError
from pdf_agent.observability.logger import configure_logging

from .responses import error_response, json_response, method_not_allowed, parse_body

load_dotenv()
configure_logging(os.getenv("LOG_LEVEL", "INFO"))

logger = logging.getLogger(__name__)


def _load_settings() -> Settings:
    settings = get_settings()
    settings.validate_required(UPLOAD_REQUIRED)
    return settings


def _get_s3_client(region: str) -> S3DocumentClient:
    if not hasattr(handler, "_s3_client"):
        handler._s3_client = S3DocumentClient(region=region)
    return handler._s3_client


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for upload URL requests.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        Dict: API Gateway proxy response
    """
    rejected = method_not_allowed(event)
    if rejected:
        return rejected

    try:
        settings = _load_settings()
        body = parse_body(event.get("body"))
        ticket = issue_upload_url(
            _get_s3_client(settings.s3_documents.region),
            bucket=settings.s3_documents.bucket,
            file_name=body.get("fileName"),
            content_type=body.get("contentType"),
            prefix=settings.s3_documents.upload_prefix,
            expires_in=settings.s3_documents.presigned_url_expiry,
        )
    except InvalidRequestError as e:
        return error_response(400, "InvalidRequest", e.message)
    except MissingConfigurationError as e:
        logger.error("handler - %s", e.message)
        return error_response(500, "MissingConfiguration", e.message)
    except Exception as e:
        logger.exception("handler - Upload URL generation failed: %s: %s", type(e).__name__, e)
        return error_response(500, "InternalError", str(e))

    return json_response(200, ticket.model_dump(by_alias=True))

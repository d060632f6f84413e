"""
Lambda handler for question answering over indexed documents.

API Gateway proxy integration: POST {"query", "topK"?, "namespace"?}
returns {"answer", "matches"}. Errors are returned as
{"error": InvalidRequest | MissingConfiguration | InternalError, "message"}.

Environment variables: see pdf_agent.configs (MODELS_*, VECTOR_STORE_*), LOG_LEVEL

Dependencies: pdf_agent.core.rag_query, pdf_agent.configs
System role: Lambda entry point for queries
"""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import ValidationError

from pdf_agent.boundary.llm import ChatClient
from pdf_agent.boundary.vdb import VectorStoreClient, build_embeddings
from pdf_agent.configs import QUERY_REQUIRED, get_settings
from pdf_agent.core.document_processing.tasks import EmbeddingTask
from pdf_agent.core.exceptions import InvalidRequestError, MissingConfigurationError
from pdf_agent.core.rag_query import QueryRequest, QueryResponder
from pdf_agent.observability.logger import configure_logging

from .responses import error_response, json_response, method_not_allowed, parse_body

load_dotenv()
configure_logging(os.getenv("LOG_LEVEL", "INFO"))

logger = logging.getLogger(__name__)


def build_responder() -> QueryResponder:
    """
    Build a QueryResponder from validated settings.

    Raises:
        MissingConfigurationError: Required settings are absent
    """
    settings = get_settings()
    settings.validate_required(QUERY_REQUIRED)

    embeddings = build_embeddings(
        model=settings.models.embedding_model,
        dimension=settings.vector_store.dimension,
        api_key=settings.models.google_api_key,
    )
    return QueryResponder(
        embedding_task=EmbeddingTask(embeddings, max_retries=settings.pipeline.max_retries),
        vector_client=VectorStoreClient(
            vectors_bucket=settings.vector_store.vectors_bucket,
            index_name=settings.vector_store.index_name,
            region=settings.vector_store.aws_region,
        ),
        chat_client=ChatClient.from_settings(
            settings.models.chat_model,
            temperature=settings.models.temperature,
            api_key=settings.models.google_api_key,
        ),
        default_top_k=settings.vector_store.top_k,
        language=settings.models.answer_language,
    )


def _get_responder() -> QueryResponder:
    if not hasattr(handler, "_responder"):
        handler._responder = build_responder()
    return handler._responder


def _parse_request(event: Dict[str, Any]) -> QueryRequest:
    try:
        return QueryRequest.model_validate(parse_body(event.get("body")))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise InvalidRequestError(f"Invalid {field or 'request'}: {first['msg']}", field=field) from e


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for query requests.

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
        responder = _get_responder()
        request = _parse_request(event)
        answer = responder.answer(request.query, top_k=request.top_k, namespace=request.namespace)
    except InvalidRequestError as e:
        logger.info("handler - Rejected query: %s", e.message)
        return error_response(400, "InvalidRequest", e.message)
    except MissingConfigurationError as e:
        logger.error("handler - %s", e.message)
        return error_response(500, "MissingConfiguration", e.message)
    except Exception as e:
        logger.exception("handler - Query failed: %s: %s", type(e).__name__, e)
        return error_response(500, "InternalError", str(e))

    return json_response(200, answer.to_response())

"""Tests for the query and upload API Gateway handlers."""

import json
from unittest.mock import MagicMock, patch

import pytest

from pdf_agent.api import query_handler, upload_handler
from pdf_agent.api.responses import parse_body
from pdf_agent.configs import Settings
from pdf_agent.core.exceptions import InvalidRequestError, MissingConfigurationError, PermanentProviderError
from pdf_agent.core.rag_query import QueryAnswer


@pytest.fixture(autouse=True)
def reset_handler_cache():
    """Drop clients cached on the handler functions between tests."""
    for attr, fn in (("_responder", query_handler.handler), ("_s3_client", upload_handler.handler)):
        if hasattr(fn, attr):
            delattr(fn, attr)
    yield
    for attr, fn in (("_responder", query_handler.handler), ("_s3_client", upload_handler.handler)):
        if hasattr(fn, attr):
            delattr(fn, attr)


def _post(body) -> dict:
    return {"httpMethod": "POST", "body": json.dumps(body) if isinstance(body, dict) else body}


def _body(response: dict) -> dict:
    return json.loads(response["body"])


# ============================================================================
# Shared response helpers
# ============================================================================


class TestParseBody:
    @pytest.mark.parametrize("raw", [None, "", "{not json", "[1, 2]"])
    def test_unusable_bodies_decode_to_empty(self, raw) -> None:
        assert parse_body(raw) == {}

    def test_json_object(self) -> None:
        assert parse_body('{"query": "hi"}') == {"query": "hi"}


# ============================================================================
# Query handler
# ============================================================================


class TestQueryHandler:
    """Status mapping and CORS headers."""

    def test_non_post_rejected(self) -> None:
        response = query_handler.handler({"httpMethod": "GET"}, None)

        assert response["statusCode"] == 405
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"

    @patch("pdf_agent.api.query_handler.build_responder")
    def test_successful_answer(self, mock_build) -> None:
        responder = MagicMock()
        responder.answer.return_value = QueryAnswer(answer="42", matches=[])
        mock_build.return_value = responder

        response = query_handler.handler(
            _post({"query": "meaning?", "topK": 3, "namespace": "team-a"}), None
        )

        assert response["statusCode"] == 200
        assert _body(response) == {"answer": "42", "matches": []}
        assert response["headers"]["Content-Type"] == "application/json"
        responder.answer.assert_called_once_with("meaning?", top_k=3, namespace="team-a")

    @patch("pdf_agent.api.query_handler.build_responder")
    def test_responder_built_once_per_container(self, mock_build) -> None:
        mock_build.return_value.answer.return_value = QueryAnswer(answer="ok")

        query_handler.handler(_post({"query": "a"}), None)
        query_handler.handler(_post({"query": "b"}), None)

        assert mock_build.call_count == 1

    @patch("pdf_agent.api.query_handler.build_responder")
    def test_invalid_request_is_400(self, mock_build) -> None:
        mock_build.return_value.answer.side_effect = InvalidRequestError("Missing query", field="query")

        response = query_handler.handler(_post({"query": ""}), None)

        assert response["statusCode"] == 400
        assert _body(response) == {"error": "InvalidRequest", "message": "Missing query"}

    @patch("pdf_agent.api.query_handler.build_responder")
    def test_non_numeric_top_k_is_400(self, mock_build) -> None:
        response = query_handler.handler(_post({"query": "q", "topK": "many"}), None)

        assert response["statusCode"] == 400
        assert _body(response)["error"] == "InvalidRequest"
        mock_build.return_value.answer.assert_not_called()

    @patch("pdf_agent.api.query_handler.build_responder")
    def test_missing_configuration_is_500(self, mock_build) -> None:
        mock_build.side_effect = MissingConfigurationError(["VECTOR_STORE_INDEX_NAME"])

        response = query_handler.handler(_post({"query": "q"}), None)

        assert response["statusCode"] == 500
        body = _body(response)
        assert body["error"] == "MissingConfiguration"
        assert "VECTOR_STORE_INDEX_NAME" in body["message"]

    @patch("pdf_agent.api.query_handler.build_responder")
    def test_provider_failure_is_internal_error(self, mock_build) -> None:
        mock_build.return_value.answer.side_effect = PermanentProviderError("chat model unavailable")

        response = query_handler.handler(_post({"query": "q"}), None)

        assert response["statusCode"] == 500
        assert _body(response)["error"] == "InternalError"


# ============================================================================
# Upload handler
# ============================================================================


class TestUploadHandler:
    """Presigned URL responses."""

    @pytest.fixture
    def configured(self, clean_env):
        clean_env.setenv("S3_DOCUMENTS_BUCKET", "docs")
        with patch("pdf_agent.api.upload_handler.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(_env_file=None)
            yield

    def test_non_post_rejected(self) -> None:
        assert upload_handler.handler({"httpMethod": "PUT"}, None)["statusCode"] == 405

    @patch("pdf_agent.api.upload_handler.S3DocumentClient")
    def test_returns_ticket(self, mock_client_cls, configured) -> None:
        mock_client_cls.return_value.generate_presigned_url.return_value = ("https://signed/put", None)

        response = upload_handler.handler(_post({"fileName": "Q3 report.pdf"}), None)

        assert response["statusCode"] == 200
        body = _body(response)
        assert body["uploadUrl"] == "https://signed/put"
        assert body["bucket"] == "docs"
        assert body["expiresIn"] == 900
        assert body["key"].startswith("uploads/")
        assert body["key"].endswith("-Q3_report.pdf")

    @patch("pdf_agent.api.upload_handler.S3DocumentClient")
    def test_non_pdf_is_400(self, mock_client_cls, configured) -> None:
        response = upload_handler.handler(_post({"fileName": "notes.txt"}), None)

        assert response["statusCode"] == 400
        assert _body(response)["error"] == "InvalidRequest"

    def test_missing_bucket_is_500(self, clean_env) -> None:
        with patch("pdf_agent.api.upload_handler.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(_env_file=None)
            response = upload_handler.handler(_post({}), None)

        assert response["statusCode"] == 500
        assert _body(response)["error"] == "MissingConfiguration"

"""
Shared test fixtures for the PDF AI agent test suite.

Provides: deterministic fake embeddings, stubbed S3/S3 Vectors clients,
pipeline settings isolated from the environment
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import os
from unittest.mock import MagicMock

import pytest
from langchain_core.embeddings import Embeddings

from pdf_agent.boundary.aws import S3DocumentClient
from pdf_agent.boundary.vdb import VectorStoreClient
from pdf_agent.core.document_processing.configs import DocumentPipelineSettings
from pdf_agent.core.document_processing.models import DocumentNotification


class FakeEmbeddings(Embeddings):
    """Deterministic embeddings: vector derived from text length and first char."""

    def __init__(self) -> None:
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    def _vector(self, text: str) -> list[float]:
        return [float(len(text)), float(ord(text[0])) if text else 0.0, 1.0]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self._vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self._vector(text)


class ProviderHTTPError(Exception):
    """Provider exception carrying an HTTP status like SDK errors do."""

    def __init__(self, status_code: int, message: str = "provider error") -> None:
        super().__init__(f"{status_code} {message}")
        self.status_code = status_code


@pytest.fixture
def fake_embeddings() -> FakeEmbeddings:
    return FakeEmbeddings()


@pytest.fixture
def sleep_delays() -> list[float]:
    """Collects retry delays; pass `sleep_delays.append` as the sleep function."""
    return []


@pytest.fixture
def mock_boto_s3():
    """Stub boto3 S3 client."""
    return MagicMock()


@pytest.fixture
def s3_document_client(mock_boto_s3) -> S3DocumentClient:
    return S3DocumentClient(region="us-east-1", client=mock_boto_s3)


@pytest.fixture
def mock_boto_s3vectors():
    """Stub boto3 s3vectors client."""
    client = MagicMock()
    client.query_vectors.return_value = {"vectors": []}
    return client


@pytest.fixture
def vector_client(mock_boto_s3vectors) -> VectorStoreClient:
    return VectorStoreClient(
        vectors_bucket="test-vectors",
        index_name="test-index",
        region="us-east-1",
        client=mock_boto_s3vectors,
    )


@pytest.fixture
def pipeline_settings() -> DocumentPipelineSettings:
    """Default pipeline settings, ignoring any local .env file."""
    return DocumentPipelineSettings(_env_file=None)


@pytest.fixture
def notification() -> DocumentNotification:
    return DocumentNotification(bucket="pdf-bucket", key="uploads/abc-report.pdf", size_bytes=2048)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every application variable so settings fall back to defaults."""
    prefixes = ("S3_DOCUMENTS_", "VECTOR_STORE_", "MODELS_", "DOC_PIPELINE_")
    for name in list(os.environ):
        if name.startswith(prefixes) or name == "GOOGLE_API_KEY":
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def http_error():
    """Factory for provider errors with an HTTP status code."""
    return ProviderHTTPError

"""Tests for the S3 Vectors client wrapper."""

import pytest
from botocore.exceptions import ClientError

from pdf_agent.boundary.vdb import (
    NON_FILTERABLE_METADATA_KEYS,
    EmbeddingRecord,
    RecordMetadata,
    RetrievalMatch,
)
from pdf_agent.core.exceptions import PermanentProviderError


class TestQueryVectors:
    """Similarity queries and match mapping."""

    def test_maps_response_to_matches(self, vector_client, mock_boto_s3vectors) -> None:
        mock_boto_s3vectors.query_vectors.return_value = {
            "vectors": [
                {
                    "key": "uploads_a-pdf-3",
                    "distance": 0.12,
                    "metadata": {
                        "filename": "uploads/a.pdf",
                        "chunk_index": 3,
                        "text": "chunk three",
                        "source_url": "s3://b/uploads/a.pdf",
                    },
                },
                {"key": "legacy-1", "distance": 0.5},
            ]
        }

        matches = vector_client.query_vectors([0.1, 0.2], top_k=2)

        assert matches[0] == RetrievalMatch(
            id="uploads_a-pdf-3",
            score=0.12,
            filename="uploads/a.pdf",
            chunk_index=3,
            source_url="s3://b/uploads/a.pdf",
            text="chunk three",
        )
        assert matches[1].text is None
        kwargs = mock_boto_s3vectors.query_vectors.call_args.kwargs
        assert kwargs["topK"] == 2
        assert kwargs["indexName"] == "test-index"
        assert kwargs["queryVector"] == {"float32": [0.1, 0.2]}
        assert kwargs["returnMetadata"] is True

    def test_namespace_selects_index(self, vector_client, mock_boto_s3vectors) -> None:
        vector_client.query_vectors([0.1], top_k=1, index_name="team-a")

        assert mock_boto_s3vectors.query_vectors.call_args.kwargs["indexName"] == "team-a"

    def test_client_error_is_wrapped(self, vector_client, mock_boto_s3vectors) -> None:
        mock_boto_s3vectors.query_vectors.side_effect = ClientError(
            {"Error": {"Code": "NotFoundException"}, "ResponseMetadata": {"HTTPStatusCode": 404}},
            "QueryVectors",
        )

        with pytest.raises(PermanentProviderError) as exc_info:
            vector_client.query_vectors([0.1], top_k=1)

        assert exc_info.value.status_code == 404
        assert exc_info.value.details["operation"] == "query_vectors"

    def test_citation_omits_text(self) -> None:
        match = RetrievalMatch(id="x-0", score=0.3, filename="f.pdf", chunk_index=0, text="secret")

        assert "text" not in match.citation()
        assert match.citation()["id"] == "x-0"


class TestPutVectorsMetadata:
    """Metadata written alongside each vector."""

    def test_long_non_ascii_text_goes_to_non_filterable_key(
        self, vector_client, mock_boto_s3vectors
    ) -> None:
        """A full window of multi-byte text exceeds 2 KB and is only written under non-filterable keys."""
        text = "Việt ngữ" + "ữ" * 992
        record = EmbeddingRecord(
            id="uploads_vi-pdf-0",
            vector=[0.1, 0.2],
            metadata=RecordMetadata(
                filename="uploads/vi.pdf",
                chunk_index=0,
                text=text,
                source_url="s3://b/uploads/vi.pdf",
            ),
        )

        vector_client.put_vectors([record])

        metadata = mock_boto_s3vectors.put_vectors.call_args.kwargs["vectors"][0]["metadata"]
        oversized = {
            key
            for key, value in metadata.items()
            if isinstance(value, str) and len(value.encode("utf-8")) > 2048
        }
        assert len(text.encode("utf-8")) > 2048
        assert metadata["text"] == text
        assert oversized <= set(NON_FILTERABLE_METADATA_KEYS)

    def test_non_filterable_keys_exist_on_record_metadata(self) -> None:
        assert set(NON_FILTERABLE_METADATA_KEYS) <= set(RecordMetadata.model_fields)

"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

The S3 Vectors index is created with a fixed dimension, so every embed call
(ingestion batches and queries alike) must request that same dimension.

Dependencies: langchain_google_genai
System role: Embedding provider for ingestion and query
"""

import logging
from typing import Any

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings that always requests the index dimension."""

    _output_dimensionality: int = 1536

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1536,
        **kwargs: Any,
    ) -> None:
        """
        Args:
            model: Google embedding model ID
            output_dimensionality: Dimension configured on the vector index
            **kwargs: Passed to GoogleGenerativeAIEmbeddings (google_api_key, ...)
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            "__init__ - Embeddings ready",
            extra={"model": model, "output_dimensionality": output_dimensionality},
        )

    def embed_documents(self, texts: list[str], **kwargs: Any) -> list[list[float]]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return super().embed_documents(texts, **kwargs)

    def embed_query(self, text: str, **kwargs: Any) -> list[float]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return super().embed_query(text, **kwargs)


def build_embeddings(
    model: str,
    dimension: int,
    api_key: str | None = None,
) -> FixedDimensionEmbeddings:
    """
    Build the embedding provider used by both ingestion and query.

    Args:
        model: Embedding model ID
        dimension: Vector dimension of the index
        api_key: Google API key (falls back to GOOGLE_API_KEY when None)

    Returns:
        FixedDimensionEmbeddings: Ready-to-use embeddings
    """
    kwargs: dict[str, Any] = {}
    if api_key:
        kwargs["google_api_key"] = api_key
    return FixedDimensionEmbeddings(model=model, output_dimensionality=dimension, **kwargs)

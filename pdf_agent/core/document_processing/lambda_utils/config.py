"""
Configuration and wiring utilities for Lambda.

Validates settings once and builds the pipeline with explicit clients.
"""

import logging
from typing import Any

from pdf_agent.boundary.aws import S3DocumentClient
from pdf_agent.boundary.vdb import VectorStoreClient, build_embeddings
from pdf_agent.configs import INGESTION_REQUIRED, Settings, get_settings

from ..entrypoint import DocumentPipeline
from ..tasks import CleanupTask, EmbeddingTask, ParsingTask, S3DownloadTask, VectorStoreTask

logger = logging.getLogger(__name__)


def load_ingestion_settings() -> Settings:
    """
    Load settings and check everything ingestion needs.

    Raises:
        MissingConfigurationError: Required settings are absent
    """
    settings = get_settings()
    settings.validate_required(INGESTION_REQUIRED)
    logger.info("load_ingestion_settings - Environment validated")
    return settings


def build_pipeline(
    settings: Settings,
    s3_client: S3DocumentClient | None = None,
    vector_client: VectorStoreClient | None = None,
    embeddings: Any | None = None,
) -> DocumentPipeline:
    """
    Build a DocumentPipeline from settings.

    Args:
        settings: Validated application settings
        s3_client: Storage client override
        vector_client: Vector index client override
        embeddings: Embeddings provider override

    Returns:
        DocumentPipeline: Ready-to-run pipeline
    """
    s3_client = s3_client or S3DocumentClient(region=settings.s3_documents.region)
    vector_client = vector_client or VectorStoreClient(
        vectors_bucket=settings.vector_store.vectors_bucket,
        index_name=settings.vector_store.index_name,
        region=settings.vector_store.aws_region,
    )
    embeddings = embeddings or build_embeddings(
        model=settings.models.embedding_model,
        dimension=settings.vector_store.dimension,
        api_key=settings.models.google_api_key,
    )
    pipeline_settings = settings.pipeline

    return DocumentPipeline(
        settings=pipeline_settings,
        download_task=S3DownloadTask(s3_client),
        parsing_task=ParsingTask(),
        embedding_task=EmbeddingTask(
            embeddings,
            batch_size=pipeline_settings.embedding_batch_size,
            max_retries=pipeline_settings.max_retries,
        ),
        vector_store_task=VectorStoreTask(
            vector_client,
            batch_size=pipeline_settings.upsert_batch_size,
        ),
        cleanup_task=CleanupTask(s3_client),
    )

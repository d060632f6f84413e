"""PDF AI agent: S3-triggered PDF ingestion into S3 Vectors and grounded Q&A."""

__version__ = "0.1.0"

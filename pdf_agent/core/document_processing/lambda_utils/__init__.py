"""Lambda helpers for the ingestion handler."""

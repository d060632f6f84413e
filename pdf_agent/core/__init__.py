"""Core business logic: ingestion pipeline, query responder, upload issuing."""

"""RAG query business logic: retrieval, context assembly and answer synthesis."""

from .models import QueryAnswer, QueryRequest
from .responder import QueryResponder

__all__ = ["QueryAnswer", "QueryRequest", "QueryResponder"]

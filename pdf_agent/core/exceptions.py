"""
Exception hierarchy for the PDF AI agent.

Provides layered exception structure for configuration, request, provider
and storage failures. All exceptions carry a details dict for logging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across ingestion and query paths
"""

from typing import Any


class PdfAgentError(Exception):
    """Base exception for all PDF AI agent errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidConfigurationError(PdfAgentError):
    """Raised when a setting has an invalid value (e.g. overlap >= window)."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class MissingConfigurationError(InvalidConfigurationError):
    """Raised when required settings are absent. Lists every missing name."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f"Missing required configuration: {', '.join(self.missing)}",
            details={"missing": self.missing},
        )


class InvalidRequestError(PdfAgentError):
    """Raised when caller input fails validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid request error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ProviderError(PdfAgentError):
    """Base exception for embedding, index and chat provider failures."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)


class TransientProviderError(ProviderError):
    """Raised when rate-limit or server errors persist after all retries."""


class PermanentProviderError(ProviderError):
    """Raised for provider errors that are never retried."""


class StorageError(PdfAgentError):
    """Raised when an object storage fetch or delete fails."""

    def __init__(
        self,
        message: str,
        bucket: str | None = None,
        key: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            bucket: Bucket holding the object
            key: Object key
            operation: Operation that failed (get, delete, presign)
            details: Additional context
        """
        details = details or {}
        if bucket:
            details["bucket"] = bucket
        if key:
            details["key"] = key
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class DocumentProcessingError(PdfAgentError):
    """Raised by the ingestion handler when a document fails to ingest."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if key:
            details["key"] = key
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when text extraction from a document fails."""


class EventParseError(PdfAgentError):
    """Raised when a storage notification cannot be parsed."""

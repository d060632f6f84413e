"""
Fixed-window text chunking task.

Splits extracted text into overlapping character windows. Windows are
counted in characters, not tokens.

Dependencies: pdf_agent.core.exceptions
System role: Chunking stage of document ingestion pipeline
"""

from pdf_agent.core.exceptions import InvalidConfigurationError

from ..models import Chunk


def split_text(text: str, window_size: int = 1000, overlap: int = 200) -> list[str]:
    """
    Split text into overlapping windows.

    Each window starts `window_size - overlap` characters after the previous
    one; the last window ends exactly at the end of the text and may be
    shorter.

    Args:
        text: Text to split
        window_size: Window length in characters
        overlap: Characters shared by adjacent windows

    Returns:
        list[str]: Windows in document order (empty for empty text)

    Raises:
        InvalidConfigurationError: window_size <= 0 or overlap outside [0, window_size)
    """
    if window_size <= 0:
        raise InvalidConfigurationError(
            f"window_size must be positive, got {window_size}",
            setting="window_size",
        )
    if not 0 <= overlap < window_size:
        raise InvalidConfigurationError(
            f"overlap must be in [0, {window_size}), got {overlap}",
            setting="overlap",
        )

    chunks = []
    length = len(text)
    start = 0
    while start < length:
        end = min(start + window_size, length)
        chunks.append(text[start:end])
        if end == length:
            break
        start = max(0, end - overlap)
    return chunks


class ChunkingTask:
    """Split document text into indexed chunks."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200) -> None:
        """
        Initialize chunking task with window configuration.

        Args:
            chunk_size: Window size in characters
            chunk_overlap: Overlap between consecutive windows

        Raises:
            InvalidConfigurationError: Invalid window/overlap combination
        """
        # Validate once up front so a bad configuration fails before any network call
        split_text("", chunk_size, chunk_overlap)
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap

    def chunk(self, text: str) -> list[Chunk]:
        """
        Split text into chunks.

        Args:
            text: Extracted document text

        Returns:
            list[Chunk]: Chunks with zero-based indices
        """
        windows = split_text(text, self._chunk_size, self._chunk_overlap)
        return [Chunk(text=window, index=i) for i, window in enumerate(windows)]

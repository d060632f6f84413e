"""Language-model boundary."""

from .chat_client import ChatClient

__all__ = ["ChatClient"]

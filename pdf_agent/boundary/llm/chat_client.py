"""
Chat model client.

Single-turn completion over a system prompt and a user prompt.

Dependencies: langchain_google_genai, langchain_core
System role: Language-model collaborator for the query path
"""

import logging
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

logger = logging.getLogger(__name__)


class ChatClient:
    """Thin wrapper turning a LangChain chat model into complete(system, user) -> str."""

    def __init__(self, model: BaseChatModel) -> None:
        self._model = model

    @classmethod
    def from_settings(
        cls,
        model_name: str,
        temperature: float = 0.2,
        api_key: str | None = None,
    ) -> "ChatClient":
        """Build a client backed by ChatGoogleGenerativeAI."""
        kwargs: dict[str, Any] = {}
        if api_key:
            kwargs["google_api_key"] = api_key
        model = ChatGoogleGenerativeAI(model=model_name, temperature=temperature, **kwargs)
        logger.info("from_settings - Chat model ready", extra={"model": model_name})
        return cls(model)

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Run one completion.

        Args:
            system_prompt: Fixed instruction for the assistant
            user_prompt: Question plus retrieved context

        Returns:
            str: Answer text, stripped
        """
        response = self._model.invoke(
            [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]
        )
        return _content_to_text(response.content).strip()


def _content_to_text(content: Any) -> str:
    # Gemini may return a list of content parts instead of a plain string
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)

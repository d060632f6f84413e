"""
Query responder.

Embeds the question with the ingestion model, retrieves the nearest
chunks, renders them as context and asks the chat model for an answer.
Stateless per call.

Dependencies: pdf_agent.boundary, document_processing.tasks
System role: RAG query business logic
"""

import logging

from pdf_agent.boundary.llm import ChatClient
from pdf_agent.boundary.vdb import VectorStoreClient
from pdf_agent.core.document_processing.tasks import EmbeddingTask
from pdf_agent.core.exceptions import InvalidRequestError

from .models import QueryAnswer
from .prompts import CONTEXT_CHAR_LIMIT, build_system_prompt, build_user_prompt, render_context

logger = logging.getLogger(__name__)

MAX_TOP_K = 100


class QueryResponder:
    """Answer questions from indexed documents."""

    def __init__(
        self,
        embedding_task: EmbeddingTask,
        vector_client: VectorStoreClient,
        chat_client: ChatClient,
        default_top_k: int = 5,
        language: str = "English",
        context_chars: int = CONTEXT_CHAR_LIMIT,
    ) -> None:
        self._embedding_task = embedding_task
        self._vector_client = vector_client
        self._chat_client = chat_client
        self._default_top_k = default_top_k
        self._system_prompt = build_system_prompt(language)
        self._context_chars = context_chars

    def answer(
        self,
        query: str | None,
        top_k: int | None = None,
        namespace: str | None = None,
    ) -> QueryAnswer:
        """
        Answer a question.

        Args:
            query: User question
            top_k: Maximum matches to retrieve (configured default when None)
            namespace: Index to query instead of the configured one

        Returns:
            QueryAnswer: Answer text and the matches used as context

        Raises:
            InvalidRequestError: Blank query or top_k out of range
            ProviderError: Embedding, index or chat call failed
        """
        question = (query or "").strip()
        if not question:
            raise InvalidRequestError("Missing query", field="query")

        top_k = self._default_top_k if top_k is None else top_k
        if not 1 <= top_k <= MAX_TOP_K:
            raise InvalidRequestError(f"topK must be between 1 and {MAX_TOP_K}", field="topK")

        vector = self._embedding_task.embed_query(question)
        matches = self._vector_client.query_vectors(vector, top_k, index_name=namespace or None)

        # Records without text cannot serve as context
        usable = [match for match in matches if match.text]
        if len(usable) < len(matches):
            logger.warning(
                "answer - Dropped %d matches without text metadata",
                len(matches) - len(usable),
            )

        context = render_context(usable, max_chars=self._context_chars)
        answer = self._chat_client.complete(self._system_prompt, build_user_prompt(question, context))

        logger.info(
            "answer - Answered query",
            extra={"match_count": len(usable), "top_k": top_k},
        )
        return QueryAnswer(answer=answer, matches=usable)

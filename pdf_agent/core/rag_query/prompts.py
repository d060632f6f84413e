"""
Prompt templates and context rendering for grounded answers.

Dependencies: None
System role: Prompt construction for the query path
"""

from typing import Sequence

from pdf_agent.boundary.vdb.vector_schemas import RetrievalMatch

CONTEXT_CHAR_LIMIT = 1500
NO_CONTEXT_PLACEHOLDER = "(none)"

SYSTEM_PROMPT_TEMPLATE = (
    "You are an AI assistant that answers concisely and accurately in {language}, "
    "based only on the provided context. If the context is not sufficient, say that "
    "you are not certain."
)

USER_PROMPT_TEMPLATE = (
    "Question: {query}\n\n"
    "Relevant context:\n{context}\n\n"
    "Instruction: Answer using the context above. If it is missing information, "
    "state clearly that the answer may not be accurate."
)


def render_context(matches: Sequence[RetrievalMatch], max_chars: int = CONTEXT_CHAR_LIMIT) -> str:
    """
    Render matches as a numbered context block in rank order.

    Each entry reads "[#rank] (score=0.123)" followed by the chunk text
    truncated to `max_chars`; entries are separated by a blank line.
    """
    blocks = []
    for rank, match in enumerate(matches, 1):
        score = f"{match.score:.3f}" if match.score is not None else "n/a"
        blocks.append(f"[#{rank}] (score={score})\n{(match.text or '')[:max_chars]}")
    return "\n\n".join(blocks)


def build_system_prompt(language: str) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(language=language)


def build_user_prompt(query: str, context: str) -> str:
    return USER_PROMPT_TEMPLATE.format(query=query, context=context or NO_CONTEXT_PLACEHOLDER)

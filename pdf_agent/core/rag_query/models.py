"""
Request and response models for the query path.

Dependencies: pydantic
System role: Query contract definition
"""

from pydantic import BaseModel, ConfigDict, Field

from pdf_agent.boundary.vdb.vector_schemas import RetrievalMatch


class QueryRequest(BaseModel):
    """Body of a query request."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(default="", description="User question")
    top_k: int | None = Field(default=None, alias="topK", description="Matches to retrieve")
    namespace: str | None = Field(default=None, description="Index to query instead of the default")


class QueryAnswer(BaseModel):
    """Answer plus the matches it was grounded on."""

    answer: str
    matches: list[RetrievalMatch] = Field(default_factory=list)

    def to_response(self) -> dict:
        """Payload returned to API callers."""
        return {
            "answer": self.answer,
            "matches": [match.citation() for match in self.matches],
        }

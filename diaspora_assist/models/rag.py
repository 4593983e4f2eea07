"""
RAG domain models.

Retrieved context bundle and generated answer passed between pipeline stages.

Dependencies: pydantic, diaspora_assist.boundary.vdb
System role: RAG pipeline data structures
"""

from pydantic import BaseModel, Field

from diaspora_assist.boundary.vdb.vector_schemas import VectorSearchResult


class RetrievedContext(BaseModel):
    """Per-query context assembled from similarity search results."""

    context_text: str = Field(default="", description="Results joined with rank/source headers")
    sources: list[str] = Field(
        default_factory=list,
        description="Distinct source identifiers among the results",
    )
    documents: list[VectorSearchResult] = Field(
        default_factory=list,
        description="Raw search results in rank order",
    )


class LLMAnswer(BaseModel):
    """Generated answer text with the sources it draws on."""

    text: str
    sources: list[str] = Field(default_factory=list)

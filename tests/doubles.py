"""
Test doubles shared across the suite.

Provides: chat model doubles, in-memory vector store, sample search results
Dependencies: langchain_core
System role: Reusable fakes for external collaborators
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

from langchain_core.documents import Document
from langchain_core.messages import AIMessage

from diaspora_assist.boundary.vdb.vector_schemas import VectorMetadata, VectorSearchResult

UK_QUESTION = "What visa do I need to work in the UK?"
UK_CHUNK = (
    "To work in the UK you usually need a Skilled Worker visa. You must have a job "
    "offer from an approved employer and a certificate of sponsorship."
)
UK_ANSWER = (
    "You will usually need a Skilled Worker visa, which requires a job offer from an "
    "approved employer and a certificate of sponsorship (Source: uk_visa_faq.txt)."
)


def make_chat_model(
    reply: Any = None,
    error: Exception | None = None,
) -> MagicMock:
    """
    Build a chat model double.

    Args:
        reply: Reply content, or a function of the message list returning it
        error: Exception raised by ainvoke instead of replying

    Returns:
        MagicMock: Object with an async ainvoke returning an AIMessage
    """
    model = MagicMock()
    if error is not None:
        model.ainvoke = AsyncMock(side_effect=error)
    elif callable(reply):
        model.ainvoke = AsyncMock(side_effect=lambda messages: AIMessage(content=reply(messages)))
    else:
        model.ainvoke = AsyncMock(return_value=AIMessage(content=reply or ""))
    return model


class InMemoryVectorStore:
    """Vector store double returning fixed results and recording indexed chunks."""

    def __init__(self, results: list[VectorSearchResult] | None = None) -> None:
        self.results = list(results or [])
        self.indexed: list[list[Document]] = []
        self.queries: list[tuple[str, int]] = []

    def index(self, chunks: list[Document]) -> list[str]:
        self.indexed.append(list(chunks))
        return [f"id-{i}" for i, _ in enumerate(chunks)]

    def search(self, query: str, k: int = 4) -> list[VectorSearchResult]:
        self.queries.append((query, k))
        return self.results[:k]


def make_result(source: str | None, content: str, chunk_index: int = 0) -> VectorSearchResult:
    """Build a search result for a source file."""
    metadata = VectorMetadata(source=source, chunk_index=chunk_index) if source else VectorMetadata()
    return VectorSearchResult(
        chunk_id=f"{source}-{chunk_index}",
        content=content,
        metadata=metadata,
        similarity_score=0.1,
    )

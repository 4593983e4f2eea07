"""
Context retrieval for RAG.

Runs similarity search and assembles the results into one prompt-ready
context block with rank/source headers and the distinct source list.

Dependencies: fastapi.concurrency, diaspora_assist.boundary.vdb
System role: Retrieval stage of the RAG pipeline
"""

import logging

from fastapi.concurrency import run_in_threadpool

from diaspora_assist.boundary.vdb.vector_schemas import VectorSearchResult
from diaspora_assist.boundary.vdb.vector_store_factory import VectorStore
from diaspora_assist.models.rag import RetrievedContext

logger = logging.getLogger(__name__)

UNKNOWN_SOURCE = "unknown"


def build_context(results: list[VectorSearchResult]) -> RetrievedContext:
    """
    Render search results into a RetrievedContext.

    Each result becomes "Source {rank} ({source}):\\n{content}"; blocks are
    separated by a blank line.

    Args:
        results: Search results in rank order

    Returns:
        RetrievedContext: Joined text, distinct sources and raw results
    """
    blocks = []
    sources: list[str] = []
    for rank, result in enumerate(results, start=1):
        source = result.metadata.source or UNKNOWN_SOURCE
        blocks.append(f"Source {rank} ({source}):\n{result.content}")
        if source not in sources:
            sources.append(source)

    return RetrievedContext(
        context_text="\n\n".join(blocks),
        sources=sources,
        documents=list(results),
    )


class ContextRetriever:
    """Query the vector store and build the prompt context."""

    def __init__(self, vector_store: VectorStore, top_k: int = 4) -> None:
        self._vector_store = vector_store
        self._top_k = top_k

    async def retrieve(self, query: str) -> RetrievedContext:
        """
        Retrieve the top-k chunks for a query.

        Args:
            query: Question text (English)

        Returns:
            RetrievedContext: Context for prompt building

        Raises:
            VectorStoreError: When the search fails
        """
        results = await run_in_threadpool(self._vector_store.search, query, self._top_k)
        context = build_context(results)
        logger.info(
            f"{__name__}:retrieve - {len(results)} chunks from {len(context.sources)} sources"
        )
        return context

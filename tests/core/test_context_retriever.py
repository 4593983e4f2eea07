"""
Test suite for context building and retrieval.

System role: Verification of the retrieval stage
"""

import pytest

from diaspora_assist.core.rag.context_retriever import ContextRetriever, build_context
from tests.doubles import InMemoryVectorStore, make_result


class TestBuildContext:
    """Test suite for build_context."""

    def test_should_render_rank_and_source_headers(self) -> None:
        """Test each result gets a 'Source N (source):' header, separated by blank lines."""
        results = [
            make_result("uk_visa_faq.txt", "First chunk"),
            make_result("canada_pr.txt", "Second chunk"),
        ]

        context = build_context(results)

        assert context.context_text == (
            "Source 1 (uk_visa_faq.txt):\nFirst chunk\n\n"
            "Source 2 (canada_pr.txt):\nSecond chunk"
        )
        assert context.documents == results

    def test_should_collect_distinct_sources(self) -> None:
        """Test sources equal the distinct source values with no duplicates."""
        results = [
            make_result("uk_visa_faq.txt", "a", 0),
            make_result("canada_pr.txt", "b", 0),
            make_result("uk_visa_faq.txt", "c", 1),
        ]

        context = build_context(results)

        assert sorted(context.sources) == ["canada_pr.txt", "uk_visa_faq.txt"]
        assert len(context.sources) == len(set(context.sources))

    def test_should_label_missing_source_unknown(self) -> None:
        """Test results without a source are attributed to 'unknown'."""
        context = build_context([make_result(None, "orphan chunk")])

        assert context.context_text.startswith("Source 1 (unknown):")
        assert context.sources == ["unknown"]

    def test_should_be_empty_without_results(self) -> None:
        """Test no results produce empty text and sources."""
        context = build_context([])

        assert context.context_text == ""
        assert context.sources == []


class TestContextRetriever:
    """Test suite for ContextRetriever.retrieve."""

    @pytest.mark.asyncio
    async def test_retrieve_should_search_with_top_k(self, uk_vector_store: InMemoryVectorStore) -> None:
        """Test retrieve queries the store with the configured k."""
        retriever = ContextRetriever(uk_vector_store, top_k=3)

        context = await retriever.retrieve("work visa")

        assert uk_vector_store.queries == [("work visa", 3)]
        assert context.sources == ["uk_visa_faq.txt"]

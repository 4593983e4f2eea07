"""
Shared test fixtures and configuration for entire test suite.

Provides: sample search results, in-memory vector store, corpus directory
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import pytest

from diaspora_assist.boundary.vdb.vector_schemas import VectorSearchResult
from tests.doubles import UK_CHUNK, InMemoryVectorStore, make_result


@pytest.fixture
def uk_result() -> VectorSearchResult:
    """Provide a single search hit from the UK visa FAQ."""
    return make_result("uk_visa_faq.txt", UK_CHUNK)


@pytest.fixture
def uk_vector_store(uk_result: VectorSearchResult) -> InMemoryVectorStore:
    """Provide a vector store that always returns the UK visa FAQ chunk."""
    return InMemoryVectorStore([uk_result])


@pytest.fixture
def documents_dir(tmp_path):
    """Provide a corpus directory with one UK document."""
    corpus = tmp_path / "documents"
    corpus.mkdir()
    (corpus / "uk_visa_faq.txt").write_text(UK_CHUNK, encoding="utf-8")
    return corpus

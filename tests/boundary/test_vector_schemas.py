"""
Test suite for vector schemas and chunk identity.

System role: Verification of deterministic chunk IDs
"""

from langchain_core.documents import Document

from diaspora_assist.boundary.vdb.vector_schemas import generate_chunk_id, to_search_result


class TestGenerateChunkId:
    """Test suite for generate_chunk_id."""

    def test_should_be_deterministic(self) -> None:
        metadata = {"source": "uk_visa_faq.txt", "chunk_index": 3}

        assert generate_chunk_id(metadata) == generate_chunk_id(dict(metadata))
        assert len(generate_chunk_id(metadata)) == 16

    def test_should_differ_by_source_and_index(self) -> None:
        first = generate_chunk_id({"source": "uk_visa_faq.txt", "chunk_index": 0})

        assert first != generate_chunk_id({"source": "uk_visa_faq.txt", "chunk_index": 1})
        assert first != generate_chunk_id({"source": "canada_pr.txt", "chunk_index": 0})

    def test_should_ignore_other_metadata(self) -> None:
        """Test only source and chunk_index feed the ID."""
        plain = {"source": "uk_visa_faq.txt", "chunk_index": 0}
        enriched = {**plain, "country": "UK", "ingested_at": "2026-01-01T00:00:00"}

        assert generate_chunk_id(plain) == generate_chunk_id(enriched)


class TestToSearchResult:
    """Test suite for to_search_result."""

    def test_should_map_metadata_and_keep_extra_keys(self) -> None:
        doc = Document(
            page_content="Skilled Worker visa",
            metadata={"source": "uk_visa_faq.txt", "chunk_id": "abc", "chunk_index": 2, "page": 7},
        )

        result = to_search_result(doc, 0.25)

        assert result.chunk_id == "abc"
        assert result.metadata.source == "uk_visa_faq.txt"
        assert result.metadata.chunk_index == 2
        assert result.metadata.model_extra == {"page": 7}
        assert result.similarity_score == 0.25

    def test_should_default_missing_source(self) -> None:
        result = to_search_result(Document(page_content="text"), 1)

        assert result.metadata.source == "unknown"
        assert result.chunk_id == ""

"""
Test suite for DocumentChunker.

Covers parameter validation, reconstruction of the source text, chunk
bounds, overlap between neighbours and per-document metadata.

System role: Verification of fixed-size chunking
"""

import pytest
from langchain_core.documents import Document

from diaspora_assist.core.rag.chunker import DocumentChunker

SAMPLE_TEXT = (
    "Skilled Worker visa\n\n  Applicants need a certificate of sponsorship.  \n"
    "Processing usually takes three weeks outside the UK.\t Fees vary by length of stay. "
) * 7


def reconstruct(chunks: list[Document], overlap: int) -> str:
    texts = [chunk.page_content for chunk in chunks]
    return texts[0] + "".join(text[overlap:] for text in texts[1:])


class TestDocumentChunkerValidation:
    """Test suite for constructor validation."""

    @pytest.mark.parametrize("size, overlap", [(0, 0), (-5, 0), (10, 10), (10, 11), (10, -1)])
    def test_init_should_reject_invalid_parameters(self, size: int, overlap: int) -> None:
        """Test invalid size/overlap combinations raise ValueError."""
        with pytest.raises(ValueError):
            DocumentChunker(chunk_size=size, chunk_overlap=overlap)


class TestDocumentChunkerChunk:
    """Test suite for DocumentChunker.chunk."""

    @pytest.mark.parametrize("size, overlap", [(500, 100), (50, 10), (37, 0), (16, 15), (1, 0)])
    def test_chunk_should_reconstruct_source_text(self, size: int, overlap: int) -> None:
        """Test dropping overlaps and concatenating reproduces the document."""
        # Arrange
        chunker = DocumentChunker(chunk_size=size, chunk_overlap=overlap)
        document = Document(page_content=SAMPLE_TEXT, metadata={"source": "uk_visa_faq.txt"})

        # Act
        chunks = chunker.chunk([document])

        # Assert
        assert reconstruct(chunks, overlap) == SAMPLE_TEXT

    @pytest.mark.parametrize("size, overlap", [(500, 100), (50, 10), (16, 15)])
    def test_chunk_should_bound_length_and_share_overlap(self, size: int, overlap: int) -> None:
        """Test every chunk fits the size and neighbours share exactly overlap chars."""
        chunker = DocumentChunker(chunk_size=size, chunk_overlap=overlap)
        chunks = chunker.chunk([Document(page_content=SAMPLE_TEXT, metadata={})])

        assert all(len(chunk.page_content) <= size for chunk in chunks)
        for previous, current in zip(chunks, chunks[1:]):
            assert previous.page_content[-overlap:] == current.page_content[:overlap]
        # All but the last chunk are full windows
        assert all(len(chunk.page_content) == size for chunk in chunks[:-1])

    def test_chunk_should_keep_short_document_whole(self) -> None:
        """Test a document shorter than chunk_size becomes one chunk."""
        chunks = DocumentChunker(500, 100).chunk([Document(page_content="Short text.", metadata={})])

        assert [chunk.page_content for chunk in chunks] == ["Short text."]

    def test_chunk_should_extend_parent_metadata(self) -> None:
        """Test chunks carry parent metadata plus chunk_index and start_index."""
        # Arrange
        chunker = DocumentChunker(chunk_size=100, chunk_overlap=20)
        parent_metadata = {"source": "canada_pr.txt", "country": "Canada", "domain": "immigration"}
        document = Document(page_content=SAMPLE_TEXT, metadata=dict(parent_metadata))

        # Act
        chunks = chunker.chunk([document])

        # Assert
        assert [chunk.metadata["chunk_index"] for chunk in chunks] == list(range(len(chunks)))
        for chunk in chunks:
            assert {k: chunk.metadata[k] for k in parent_metadata} == parent_metadata
            start = chunk.metadata["start_index"]
            assert SAMPLE_TEXT[start:start + len(chunk.page_content)] == chunk.page_content
        assert document.metadata == parent_metadata

    def test_chunk_should_number_each_document_from_zero(self) -> None:
        """Test chunk_index restarts for every document."""
        chunker = DocumentChunker(chunk_size=40, chunk_overlap=5)
        documents = [
            Document(page_content=SAMPLE_TEXT[:120], metadata={"source": "a.txt"}),
            Document(page_content=SAMPLE_TEXT[:90], metadata={"source": "b.txt"}),
        ]

        chunks = chunker.chunk(documents)

        for source in ("a.txt", "b.txt"):
            indices = [c.metadata["chunk_index"] for c in chunks if c.metadata["source"] == source]
            assert indices == list(range(len(indices)))

    def test_chunk_should_skip_empty_documents(self) -> None:
        """Test empty documents and empty input produce no chunks."""
        chunker = DocumentChunker()

        assert chunker.chunk([]) == []
        assert chunker.chunk([Document(page_content="", metadata={"source": "empty.txt"})]) == []

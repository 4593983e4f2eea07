"""
Fixed-size character chunking.

Splits documents into overlapping windows of at most chunk_size characters,
advancing by chunk_size - chunk_overlap. Dropping the first chunk_overlap
characters of every chunk after the first and concatenating reproduces the
source text exactly.

Dependencies: langchain_text_splitters
System role: Second stage of the RAG pipeline
"""

from langchain_core.documents import Document
from langchain_text_splitters import CharacterTextSplitter


class DocumentChunker:
    """Split documents into fixed-size overlapping chunks."""

    def __init__(
        self,
        chunk_size: int = 500,
        chunk_overlap: int = 100,
    ) -> None:
        """
        Initialize chunker with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Characters shared by consecutive chunks

        Raises:
            ValueError: If chunk_size <= 0 or overlap is not in [0, chunk_size)
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if not 0 <= chunk_overlap < chunk_size:
            raise ValueError(
                f"chunk_overlap must be in [0, {chunk_size}), got {chunk_overlap}"
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

        # Empty separator splits per character; whitespace must survive so
        # windows stay contiguous substrings of the source.
        self._splitter = CharacterTextSplitter(
            separator="",
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            keep_separator=False,
            strip_whitespace=False,
            add_start_index=True,
            length_function=len,
        )

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split documents into chunks.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[Document]: Chunks carrying parent metadata plus
                chunk_index and start_index
        """
        chunks: list[Document] = []
        for document in documents:
            if not document.page_content:
                continue

            pieces = self._splitter.create_documents(
                [document.page_content],
                metadatas=[document.metadata],
            )
            for chunk_index, piece in enumerate(pieces):
                piece.metadata["chunk_index"] = chunk_index
                chunks.append(piece)

        return chunks

"""
FAISS vector store for local development.

Provides the same interface as S3VectorsStore but keeps the index on local disk.
Uses Google Gemini embeddings for consistency with production.

Dependencies: faiss-cpu, langchain_community, diaspora_assist.boundary.vdb
System role: Local vector store for development RAG
"""

import logging
from pathlib import Path

from langchain_community.docstore.in_memory import InMemoryDocstore
from langchain_community.vectorstores import FAISS
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from diaspora_assist.boundary.vdb.vector_schemas import (
    VectorSearchResult,
    generate_chunk_id,
    to_search_result,
)
from diaspora_assist.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class FAISSVectorsStore:
    """
    FAISS vector store for local development.

    Wraps LangChain FAISS with deterministic chunk IDs so repeated indexing
    of the same corpus replaces vectors instead of duplicating them.
    Persists the index to disk under one directory per namespace.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        namespace: str = "immigration-docs",
        index_dir: str = "/tmp/.faiss_index",
        embedding_dimension: int = 1024,
    ) -> None:
        """
        Initialize FAISS vector store.

        Args:
            embeddings: Embedding model used for chunks and queries
            namespace: Index name, also the on-disk file stem
            index_dir: Directory holding persisted indexes
            embedding_dimension: Vector size used when creating a new index
        """
        self._embeddings = embeddings
        self._namespace = namespace
        self._index_dir = Path(index_dir)
        self._embedding_dimension = embedding_dimension

        self._index_dir.mkdir(parents=True, exist_ok=True)
        self._vector_store = self._load_or_create_index()

    @property
    def namespace(self) -> str:
        """Index name vectors are upserted into."""
        return self._namespace

    def _load_or_create_index(self) -> FAISS:
        """Load existing FAISS index or create an empty one."""
        try:
            vector_store = FAISS.load_local(
                str(self._index_dir),
                self._embeddings,
                index_name=self._namespace,
                allow_dangerous_deserialization=True,
            )
            logger.info(f"{__name__}:_load_or_create_index - Loaded index '{self._namespace}'")
            return vector_store
        except Exception as e:
            logger.info(
                f"{__name__}:_load_or_create_index - No usable index "
                f"({type(e).__name__}), creating '{self._namespace}'"
            )

        import faiss

        return FAISS(
            embedding_function=self._embeddings,
            index=faiss.IndexFlatL2(self._embedding_dimension),
            docstore=InMemoryDocstore(),
            index_to_docstore_id={},
        )

    def index(self, chunks: list[Document]) -> list[str]:
        """
        Embed and upsert chunks into the namespace.

        Args:
            chunks: Chunk documents with source/chunk_index metadata

        Returns:
            list[str]: Chunk IDs written

        Raises:
            VectorStoreError: If embedding or persistence fails
        """
        if not chunks:
            return []

        ids = [generate_chunk_id(chunk.metadata) for chunk in chunks]
        metadatas = [
            {**chunk.metadata, "chunk_id": chunk_id}
            for chunk, chunk_id in zip(chunks, ids)
        ]

        try:
            existing = set(self._vector_store.index_to_docstore_id.values())
            stale = [chunk_id for chunk_id in ids if chunk_id in existing]
            if stale:
                self._vector_store.delete(ids=stale)

            self._vector_store.add_texts(
                texts=[chunk.page_content for chunk in chunks],
                metadatas=metadatas,
                ids=ids,
            )
            self._vector_store.save_local(str(self._index_dir), index_name=self._namespace)
        except Exception as e:
            raise VectorStoreError(
                message="Failed to index chunks into FAISS",
                operation="index",
                details={"error": str(e), "chunk_count": len(chunks)},
            ) from e

        logger.info(
            f"{__name__}:index - Upserted {len(ids)} chunks",
            extra={"namespace": self._namespace, "replaced": len(stale)},
        )
        return ids

    def search(self, query: str, k: int = 4) -> list[VectorSearchResult]:
        """
        Embed the query and return the k nearest chunks.

        Args:
            query: Search query text
            k: Number of results to return

        Returns:
            list[VectorSearchResult]: Results in rank order

        Raises:
            VectorStoreError: If embedding or search fails
        """
        try:
            results = self._vector_store.similarity_search_with_score(query=query, k=k)
        except Exception as e:
            raise VectorStoreError(
                message="Failed to search FAISS index",
                operation="search",
                details={"error": str(e), "k": k},
            ) from e

        search_results = [to_search_result(doc, score) for doc, score in results]
        logger.info(
            f"{__name__}:search - Found {len(search_results)} results",
            extra={"namespace": self._namespace, "k": k},
        )
        return search_results

"""
Vector store factory for selecting between FAISS (dev) and S3Vectors (prod).

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: diaspora_assist.boundary.vdb, diaspora_assist.configs
System role: Vector store instantiation and selection
"""

import logging
from typing import Protocol

from langchain_core.documents import Document

from diaspora_assist.boundary.vdb.embeddings_wrapper import FixedDimensionEmbeddings
from diaspora_assist.boundary.vdb.vector_schemas import VectorSearchResult
from diaspora_assist.configs import Settings, get_settings

logger = logging.getLogger(__name__)


class VectorStore(Protocol):
    """Operations the RAG pipeline needs from a vector index."""

    def index(self, chunks: list[Document]) -> list[str]: ...

    def search(self, query: str, k: int = 4) -> list[VectorSearchResult]: ...


def get_vector_store(settings: Settings | None = None) -> VectorStore:
    """
    Factory function to get vector store based on environment configuration.

    Args:
        settings: Application settings (defaults to the cached instance)

    Returns:
        FAISSVectorsStore or S3VectorsStore: Configured vector store instance

    Raises:
        ValueError: If VECTOR_STORE_STORE_TYPE is invalid
    """
    settings = settings or get_settings()
    vs_settings = settings.vector_store
    store_type = vs_settings.store_type.lower()

    if store_type not in ("faiss", "s3"):
        raise ValueError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'faiss' (dev) or 's3' (production)."
        )

    embedding_kwargs = {}
    if settings.llm.google_api_key:
        embedding_kwargs["google_api_key"] = settings.llm.google_api_key
    embeddings = FixedDimensionEmbeddings(
        model=vs_settings.embedding_model,
        output_dimensionality=vs_settings.embedding_dimension,
        **embedding_kwargs,
    )

    if store_type == "faiss":
        from diaspora_assist.boundary.vdb.faiss_vectors_store import FAISSVectorsStore

        logger.info(
            f"{__name__}:get_vector_store - Creating FAISS vector store (local dev mode)"
        )
        return FAISSVectorsStore(
            embeddings=embeddings,
            namespace=vs_settings.namespace,
            index_dir=vs_settings.faiss_index_dir,
            embedding_dimension=vs_settings.embedding_dimension,
        )

    from diaspora_assist.boundary.vdb.s3_vectors_store import S3VectorsStore

    logger.info(f"{__name__}:get_vector_store - Creating S3 Vectors store (production mode)")
    return S3VectorsStore(
        embeddings=embeddings,
        vectors_bucket=vs_settings.vectors_bucket,
        namespace=vs_settings.namespace,
        region=vs_settings.aws_region,
    )

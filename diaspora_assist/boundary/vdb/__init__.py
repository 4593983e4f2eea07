"""
Vector database boundary layer.

Provides vector store clients for storage and retrieval operations.
- FAISSVectorsStore: Local FAISS index (development, tests)
- S3VectorsStore: Production S3 Vectors client (LangChain integration)

Dependencies: langchain_community, langchain_aws
System role: Vector store adapter for RAG retrieval
"""

from diaspora_assist.boundary.vdb.vector_schemas import (
    VectorMetadata,
    VectorSearchResult,
    generate_chunk_id,
)
from diaspora_assist.boundary.vdb.vector_store_factory import VectorStore, get_vector_store

__all__ = [
    "VectorMetadata",
    "VectorSearchResult",
    "VectorStore",
    "generate_chunk_id",
    "get_vector_store",
]

"""
Vector database schemas.

Pydantic models for vector operations (metadata, results) and the helpers
that map chunk documents onto them.
Used for type-safe vector store interactions.

Dependencies: pydantic, langchain_core
System role: Type definitions for vector operations
"""

import hashlib
from typing import Any

from langchain_core.documents import Document
from pydantic import BaseModel, ConfigDict, Field


class VectorMetadata(BaseModel):
    """
    Metadata attached to each vector.

    Mirrors the provenance metadata the document loader and chunker attach.
    Unknown keys are kept so extra loader metadata passes through untouched.
    """

    model_config = ConfigDict(extra="allow")

    source: str = Field(default="unknown", description="Source file name")
    country: str | None = Field(default=None, description="Inferred country category")
    domain: str | None = Field(default=None, description="Inferred domain category")
    chunk_id: str = Field(default="", description="Deterministic chunk identifier")
    chunk_index: int | None = Field(default=None, description="Position within the source document")
    start_index: int | None = Field(default=None, description="Character offset within the source document")
    ingested_at: str | None = Field(default=None, description="Ingestion timestamp")


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    chunk_id: str = Field(description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    metadata: VectorMetadata = Field(description="Chunk metadata")
    similarity_score: float = Field(description="Backend-specific similarity or distance score")


def generate_chunk_id(metadata: dict[str, Any]) -> str:
    """
    Generate deterministic chunk ID from source identity.

    Re-indexing the same corpus yields the same IDs, so upserts overwrite.

    Args:
        metadata: Chunk metadata with source and chunk_index

    Returns:
        str: SHA-256 hash prefix of source + chunk_index
    """
    source = metadata.get("source", "")
    chunk_index = metadata.get("chunk_index", 0)
    hash_input = f"{source}:{chunk_index}"
    return hashlib.sha256(hash_input.encode()).hexdigest()[:16]


def to_search_result(doc: Document, score: float) -> VectorSearchResult:
    """
    Convert a LangChain search hit into a VectorSearchResult.

    Args:
        doc: Document returned by the vector store
        score: Score returned alongside it

    Returns:
        VectorSearchResult: Typed result with metadata passed through
    """
    metadata = dict(doc.metadata or {})
    return VectorSearchResult(
        chunk_id=metadata.get("chunk_id", ""),
        content=doc.page_content,
        metadata=VectorMetadata(**metadata),
        similarity_score=float(score),
    )

"""
Vector store configuration settings.

Selects the vector index backend and its namespace, plus the embedding
model used for both indexing and querying.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (FAISS for dev, S3 Vectors for prod)."""

    store_type: str = Field(
        default="faiss",
        description="Vector store type: 'faiss' for local dev, 's3' for production",
    )
    namespace: str = Field(
        default="immigration-docs",
        description="Index name the corpus is upserted into",
    )
    vectors_bucket: str = Field(
        default="diaspora-assist-vectors",
        description="S3 Vectors bucket name",
    )
    aws_region: str = Field(default="eu-west-2", description="AWS region for S3 Vectors")
    faiss_index_dir: str = Field(
        default="/tmp/.faiss_index",
        description="Directory holding persisted local FAISS indexes",
    )

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    embedding_dimension: int = Field(
        default=1024,
        description="Embedding vector dimension",
    )

    top_k: int = Field(default=4, description="Number of chunks retrieved per query")

    class Config:
        """Pydantic config."""

        env_prefix = "VECTOR_STORE_"
        case_sensitive = False

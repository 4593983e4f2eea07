"""
RAG pipeline configuration settings.

Document corpus location, chunking parameters and answer length bounds
used by the heuristic evaluator.

Dependencies: pydantic_settings
System role: Retrieval-augmented generation configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RAGSettings(BaseSettings):
    """Corpus, chunking and evaluation bounds."""

    model_config = SettingsConfigDict(
        env_prefix="RAG_",
        case_sensitive=False,
        extra="ignore",
    )

    documents_dir: str = Field(
        default="data/documents",
        description="Directory of plain-text source documents",
    )
    chunk_size: int = Field(default=500, description="Maximum chunk length in characters")
    chunk_overlap: int = Field(
        default=100,
        description="Characters shared by consecutive chunks",
    )
    reindex_on_request: bool = Field(
        default=True,
        description="Reload, chunk and upsert the corpus on every question",
    )
    min_answer_length: int = Field(
        default=50,
        description="Answers shorter than this are penalised",
    )
    max_answer_length: int = Field(
        default=2000,
        description="Answers longer than this are penalised",
    )

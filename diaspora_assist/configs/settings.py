"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from diaspora_assist.configs.base import BaseSettings
from diaspora_assist.configs.keep_alive import KeepAliveSettings
from diaspora_assist.configs.llm import LLMSettings
from diaspora_assist.configs.rag import RAGSettings
from diaspora_assist.configs.storage import StorageSettings
from diaspora_assist.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    llm: LLMSettings = LLMSettings()
    vector_store: VectorStoreSettings = VectorStoreSettings()
    rag: RAGSettings = RAGSettings()
    storage: StorageSettings = StorageSettings()
    keep_alive: KeepAliveSettings = KeepAliveSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from diaspora_assist.configs import get_settings
        settings = get_settings()
    """
    return Settings()

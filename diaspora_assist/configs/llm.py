"""
Language model configuration settings.

Model identifiers for chat completion (answers, intent, translation,
evaluation) and audio transcription.

Dependencies: pydantic, pydantic_settings
System role: Hosted language model configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Google Gemini model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model used for answers, intent, translation and evaluation",
    )
    transcription_model: str = Field(
        default="gemini-2.5-flash",
        description="Multimodal model used for speech-to-text",
    )
    google_api_key: str | None = Field(
        default=None,
        description="Google API key (falls back to GOOGLE_API_KEY in the environment)",
    )

"""
Local storage configuration settings.

Feedback log location and temporary audio upload handling.

Dependencies: pydantic_settings
System role: File storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Settings for the feedback log and audio uploads."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    feedback_path: str = Field(
        default="data/feedback.json",
        description="JSON document holding every feedback entry",
    )
    upload_dir: str = Field(
        default="uploads",
        description="Directory for temporary audio uploads",
    )
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted audio upload size (default 10MB)",
    )

"""
Feedback domain model.

Persisted record of an answer, its automatic score and an optional user rating.

Dependencies: pydantic
System role: Feedback log entry structure
"""

from pydantic import BaseModel, Field


class FeedbackEntry(BaseModel):
    """Single entry in the append-only feedback log."""

    question: str
    answer: str
    sources: list[str] = Field(default_factory=list)
    ai_score: float = Field(description="Automatic evaluation score (0-1)")
    ai_reason: str = Field(default="", description="Automatic evaluation reasons")
    user_rating: int | None = Field(default=None, ge=1, le=5, description="User rating (1-5)")
    timestamp: str = Field(description="ISO-8601 UTC creation time")
    language: str | None = None

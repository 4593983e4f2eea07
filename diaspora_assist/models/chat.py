"""
Chat domain models and schemas.

Request/response schemas for question, audio and feedback operations.

Dependencies: pydantic
System role: Assistant API contracts
"""

from pydantic import BaseModel, Field

from diaspora_assist.models.evaluation import Evaluation
from diaspora_assist.models.intent import Intent


class ConversationTurn(BaseModel):
    """One prior question/answer exchange supplied by the caller."""

    question: str
    answer: str


class QuestionRequest(BaseModel):
    """Request schema for text questions."""

    question: str = Field(min_length=1, description="User question in their own language")
    language: str | None = Field(default=None, description="Language code, e.g. 'fr'")
    conversation: list[ConversationTurn] = Field(
        default_factory=list,
        description="Prior turns in chronological order",
    )


class AnswerResponse(BaseModel):
    """Response schema for text and audio questions."""

    answer: str
    intent: Intent


class FeedbackRequest(BaseModel):
    """User rating for a previously returned answer."""

    question: str
    answer: str
    sources: list[str] = Field(default_factory=list)
    rating: int = Field(ge=1, le=5, description="User rating (1-5)")


class FeedbackResponse(BaseModel):
    """Response schema for feedback submission."""

    status: str = "ok"


class RoutedAnswer(BaseModel):
    """Router output: answer text, detected intent and its sources."""

    answer: str
    intent: Intent
    sources: list[str] = Field(default_factory=list)


class AssistantReply(BaseModel):
    """Final answer after translation, with its automatic evaluation."""

    answer: str
    intent: Intent
    sources: list[str] = Field(default_factory=list)
    evaluation: Evaluation

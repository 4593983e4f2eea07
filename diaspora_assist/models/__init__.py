"""
Domain models.

Pydantic schemas shared by the RAG pipeline, evaluator, feedback store and API.
"""

from diaspora_assist.models.chat import (
    AnswerResponse,
    AssistantReply,
    ConversationTurn,
    FeedbackRequest,
    FeedbackResponse,
    QuestionRequest,
    RoutedAnswer,
)
from diaspora_assist.models.evaluation import SCORE_WEIGHTS, Evaluation, weighted_overall
from diaspora_assist.models.feedback import FeedbackEntry
from diaspora_assist.models.intent import Intent
from diaspora_assist.models.rag import LLMAnswer, RetrievedContext

__all__ = [
    "AnswerResponse",
    "AssistantReply",
    "ConversationTurn",
    "FeedbackRequest",
    "FeedbackResponse",
    "QuestionRequest",
    "RoutedAnswer",
    "SCORE_WEIGHTS",
    "Evaluation",
    "weighted_overall",
    "FeedbackEntry",
    "Intent",
    "LLMAnswer",
    "RetrievedContext",
]

"""
Workflow router.

Classifies a question and dispatches it to the handler registered for its
intent. Every intent currently maps to the same RAG handler; a new
intent-specific workflow is one more entry in the handler table.

Dependencies: diaspora_assist.core.rag, diaspora_assist.core.workflows
System role: Top-level question orchestration
"""

import logging
from collections.abc import Awaitable, Callable

from diaspora_assist.core.rag.pipeline import RAGPipeline
from diaspora_assist.core.workflows.intent_classifier import IntentClassifier
from diaspora_assist.models.chat import ConversationTurn, RoutedAnswer
from diaspora_assist.models.intent import Intent
from diaspora_assist.models.rag import LLMAnswer

logger = logging.getLogger(__name__)

IntentHandler = Callable[[str, list[ConversationTurn], str], Awaitable[LLMAnswer]]


class WorkflowRouter:
    """Route questions through intent classification to a workflow."""

    def __init__(self, classifier: IntentClassifier, pipeline: RAGPipeline) -> None:
        self._classifier = classifier
        self._pipeline = pipeline
        self._handlers: dict[Intent, IntentHandler] = {
            Intent.VISA_ELIGIBILITY: self._answer_from_documents,
            Intent.DOCUMENT_REQUIREMENTS: self._answer_from_documents,
            Intent.GENERAL_INFO: self._answer_from_documents,
        }

    @property
    def handlers(self) -> dict[Intent, IntentHandler]:
        return dict(self._handlers)

    async def _answer_from_documents(
        self,
        question: str,
        conversation: list[ConversationTurn],
        language: str,
    ) -> LLMAnswer:
        return await self._pipeline.ask(question, language, conversation)

    async def route(
        self,
        question: str,
        conversation: list[ConversationTurn] | None = None,
        language: str = "English",
    ) -> RoutedAnswer:
        """
        Classify and answer a question.

        Args:
            question: Question text
            conversation: Prior turns in chronological order
            language: Language name for the generated answer

        Returns:
            RoutedAnswer: Answer text, detected intent and sources
        """
        intent = await self._classifier.classify(question)
        handler = self._handlers.get(intent, self._handlers[Intent.default()])

        logger.info(f"{__name__}:route - Dispatching intent={intent.value}")
        answer = await handler(question, list(conversation or []), language)

        return RoutedAnswer(answer=answer.text, intent=intent, sources=answer.sources)

"""
Dependency injection container.

Builds each external client once per process and wires them into the
assistant service. Route handlers receive services through Depends
factories, which tests replace with app.dependency_overrides.

Dependencies: diaspora_assist.configs, diaspora_assist.application, diaspora_assist.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from diaspora_assist.application.services.assistant_service import AssistantService
from diaspora_assist.application.services.keep_alive_service import KeepAliveService
from diaspora_assist.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._vector_store = None
        self._pipeline = None
        self._router = None
        self._translator = None
        self._transcriber = None
        self._evaluator = None
        self._feedback_store = None
        self._assistant_service = None
        self._keep_alive_service = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def vector_store(self):
        """Get cached vector store."""
        if self._vector_store is None:
            from diaspora_assist.boundary.vdb.vector_store_factory import get_vector_store
            self._vector_store = get_vector_store(self.settings)
        return self._vector_store

    def _chat_model(self, temperature: float, max_output_tokens: int):
        from diaspora_assist.boundary.llm.chat_model import create_chat_model
        return create_chat_model(self.settings.llm, temperature, max_output_tokens)

    @property
    def pipeline(self):
        """Get cached RAG pipeline."""
        if self._pipeline is None:
            from diaspora_assist.core.rag import (
                AnswerGenerator,
                ContextRetriever,
                DocumentChunker,
                DocumentLoader,
                RAGPipeline,
            )
            from diaspora_assist.core.rag.answer_generator import (
                ANSWER_MAX_OUTPUT_TOKENS,
                ANSWER_TEMPERATURE,
            )

            rag = self.settings.rag
            self._pipeline = RAGPipeline(
                loader=DocumentLoader(rag.documents_dir),
                chunker=DocumentChunker(rag.chunk_size, rag.chunk_overlap),
                vector_store=self.vector_store,
                retriever=ContextRetriever(self.vector_store, self.settings.vector_store.top_k),
                generator=AnswerGenerator(
                    self._chat_model(ANSWER_TEMPERATURE, ANSWER_MAX_OUTPUT_TOKENS)
                ),
                reindex_on_request=rag.reindex_on_request,
            )
        return self._pipeline

    @property
    def router(self):
        """Get cached workflow router."""
        if self._router is None:
            from diaspora_assist.core.workflows import IntentClassifier, WorkflowRouter
            from diaspora_assist.core.workflows.intent_classifier import (
                INTENT_MAX_OUTPUT_TOKENS,
                INTENT_TEMPERATURE,
            )

            classifier = IntentClassifier(
                self._chat_model(INTENT_TEMPERATURE, INTENT_MAX_OUTPUT_TOKENS)
            )
            self._router = WorkflowRouter(classifier, self.pipeline)
        return self._router

    @property
    def translator(self):
        """Get cached translator."""
        if self._translator is None:
            from diaspora_assist.core.language.translator import (
                TRANSLATION_MAX_OUTPUT_TOKENS,
                TRANSLATION_TEMPERATURE,
                Translator,
            )

            self._translator = Translator(
                self._chat_model(TRANSLATION_TEMPERATURE, TRANSLATION_MAX_OUTPUT_TOKENS)
            )
        return self._translator

    @property
    def transcriber(self):
        """Get cached speech transcriber."""
        if self._transcriber is None:
            from google import genai

            from diaspora_assist.core.language.speech_to_text import SpeechTranscriber

            llm = self.settings.llm
            client = genai.Client(api_key=llm.google_api_key) if llm.google_api_key else genai.Client()
            self._transcriber = SpeechTranscriber(client, llm.transcription_model)
        return self._transcriber

    @property
    def evaluator(self):
        """Get cached evaluator."""
        if self._evaluator is None:
            from diaspora_assist.core.evaluation import Evaluator, LLMJudge
            from diaspora_assist.core.evaluation.llm_judge import (
                JUDGE_MAX_OUTPUT_TOKENS,
                JUDGE_TEMPERATURE,
            )

            rag = self.settings.rag
            self._evaluator = Evaluator(
                LLMJudge(self._chat_model(JUDGE_TEMPERATURE, JUDGE_MAX_OUTPUT_TOKENS)),
                min_length=rag.min_answer_length,
                max_length=rag.max_answer_length,
            )
        return self._evaluator

    @property
    def feedback_store(self):
        """Get cached feedback store."""
        if self._feedback_store is None:
            from diaspora_assist.boundary.storage import FeedbackStore
            self._feedback_store = FeedbackStore(self.settings.storage.feedback_path)
        return self._feedback_store

    @property
    def assistant_service(self) -> AssistantService:
        """Get cached assistant service."""
        if self._assistant_service is None:
            self._assistant_service = AssistantService(
                router=self.router,
                translator=self.translator,
                transcriber=self.transcriber,
                evaluator=self.evaluator,
                feedback_store=self.feedback_store,
            )
        return self._assistant_service

    @property
    def keep_alive_service(self) -> KeepAliveService:
        """Get cached keep-alive service."""
        if self._keep_alive_service is None:
            self._keep_alive_service = KeepAliveService(
                self.settings.keep_alive,
                environment=self.settings.environment,
                port=self.settings.port,
            )
        return self._keep_alive_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._vector_store = None
        self._pipeline = None
        self._router = None
        self._translator = None
        self._transcriber = None
        self._evaluator = None
        self._feedback_store = None
        self._assistant_service = None
        self._keep_alive_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_assistant_service() -> AssistantService:
    """
    Get assistant service instance.

    Returns:
        AssistantService: Service wired with the process-wide clients
    """
    return get_service_cache().assistant_service

"""
Assistant service for multilingual question answering.

Orchestrates the text and audio flows: translate in, route, translate out,
evaluate and log feedback. Also attaches user ratings to logged answers.

Dependencies: diaspora_assist.core, diaspora_assist.boundary.storage
System role: Assistant service orchestration layer
"""

import asyncio
import logging
from pathlib import Path

from diaspora_assist.boundary.storage.feedback_store import FeedbackStore
from diaspora_assist.core.evaluation.evaluator import Evaluator
from diaspora_assist.core.language.speech_to_text import SpeechTranscriber
from diaspora_assist.core.language.translator import Translator, is_english, language_name
from diaspora_assist.core.workflows.router import WorkflowRouter
from diaspora_assist.models.chat import AssistantReply, ConversationTurn, RoutedAnswer
from diaspora_assist.models.rag import LLMAnswer

logger = logging.getLogger(__name__)

PIPELINE_LANGUAGE = "English"


class AssistantService:
    """
    Assistant service for text and audio questions.

    The RAG pipeline always runs in English; questions, history and answers
    are translated at the edges when the user writes in another language.
    """

    def __init__(
        self,
        router: WorkflowRouter,
        translator: Translator,
        transcriber: SpeechTranscriber,
        evaluator: Evaluator,
        feedback_store: FeedbackStore,
    ) -> None:
        self.router = router
        self.translator = translator
        self.transcriber = transcriber
        self.evaluator = evaluator
        self.feedback_store = feedback_store

    async def _translate_turn(self, turn: ConversationTurn) -> ConversationTurn:
        question, answer = await asyncio.gather(
            self.translator.translate(turn.question, PIPELINE_LANGUAGE),
            self.translator.translate(turn.answer, PIPELINE_LANGUAGE),
        )
        return ConversationTurn(question=question, answer=answer)

    async def _finish(
        self,
        routed: RoutedAnswer,
        question: str,
        language: str | None,
    ) -> AssistantReply:
        """
        Translate the answer back, evaluate it and log feedback.

        Flow:
        1. Translate the English answer to the user's language
        2. Evaluate the English answer against the question as asked
        3. Append the final answer and score to the feedback log

        Raises:
            OSError: If the feedback log cannot be written
        """
        final_answer = routed.answer
        if not is_english(language):
            final_answer = await self.translator.translate(routed.answer, language_name(language))

        user_language = PIPELINE_LANGUAGE if is_english(language) else language_name(language)
        evaluation = await self.evaluator.evaluate(
            LLMAnswer(text=routed.answer, sources=routed.sources),
            question,
            user_language,
        )

        await self.feedback_store.record_automatic(
            LLMAnswer(text=final_answer, sources=routed.sources),
            question,
            evaluation.overall_score,
            "; ".join(evaluation.reasons),
            language,
        )

        return AssistantReply(
            answer=final_answer,
            intent=routed.intent,
            sources=routed.sources,
            evaluation=evaluation,
        )

    async def answer_question(
        self,
        question: str,
        language: str | None = None,
        conversation: list[ConversationTurn] | None = None,
    ) -> AssistantReply:
        """
        Answer a text question.

        Args:
            question: Question in the user's language
            language: Language code (None or "en" for English)
            conversation: Prior turns in chronological order

        Returns:
            AssistantReply: Answer in the user's language with intent,
                sources and evaluation
        """
        conversation = list(conversation or [])
        english_question = question

        if not is_english(language):
            english_question = await self.translator.translate(question, PIPELINE_LANGUAGE)
            conversation = list(
                await asyncio.gather(*(self._translate_turn(turn) for turn in conversation))
            )

        logger.info(
            f"{__name__}:answer_question - language={language or 'en'}, "
            f"history_turns={len(conversation)}"
        )
        routed = await self.router.route(english_question, conversation, PIPELINE_LANGUAGE)
        return await self._finish(routed, question, language)

    async def answer_audio(self, audio_path: str | Path, language: str = "en") -> AssistantReply:
        """
        Answer a spoken question.

        Args:
            audio_path: Uploaded audio file (deleted by the transcriber)
            language: Language code of the recording

        Returns:
            AssistantReply: Answer in the user's language

        Raises:
            EmptyAudioError: If the audio file is missing or empty
        """
        transcript = await self.transcriber.transcribe(audio_path, language)
        english_question = await self.translator.translate(transcript, PIPELINE_LANGUAGE)

        logger.info(
            f"{__name__}:answer_audio - language={language}, transcript_len={len(transcript)}"
        )
        routed = await self.router.route(english_question, None, PIPELINE_LANGUAGE)
        return await self._finish(routed, transcript, language)

    async def submit_feedback(self, question: str, answer: str, rating: int) -> bool:
        """
        Attach a user rating to a logged answer.

        Returns:
            bool: False when no logged answer matched
        """
        return await self.feedback_store.record_user_rating(question, answer, rating)

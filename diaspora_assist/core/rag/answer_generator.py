"""
Answer generation with the hosted chat model.

Sends the built prompt to the model and pairs the reply with the sources of
the context it was built from. Failures degrade to a fixed apology.

Dependencies: langchain_core.messages, diaspora_assist.boundary.llm
System role: Generation stage of the RAG pipeline
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from diaspora_assist.boundary.llm.chat_model import message_text
from diaspora_assist.models.rag import LLMAnswer, RetrievedContext
from diaspora_assist.observability.log_utils import log_degraded

logger = logging.getLogger(__name__)

ANSWER_SYSTEM_PROMPT = (
    "You are an AI assistant that answers questions based on provided context. "
    "Be concise and factual."
)
GENERATION_FAILED_TEXT = "Sorry, I could not generate an answer at this time."

# Model configuration expected by this component.
ANSWER_TEMPERATURE = 0.2
ANSWER_MAX_OUTPUT_TOKENS = 800


class AnswerGenerator:
    """Generate a grounded answer from a prompt."""

    def __init__(self, model: BaseChatModel) -> None:
        """
        Args:
            model: Chat model configured with ANSWER_TEMPERATURE and
                ANSWER_MAX_OUTPUT_TOKENS
        """
        self._model = model

    async def generate(self, prompt: str, context: RetrievedContext) -> LLMAnswer:
        """
        Generate an answer for a prompt.

        Args:
            prompt: Full prompt from build_prompt
            context: Context the prompt was built from

        Returns:
            LLMAnswer: Reply text with the context's sources, or the apology
                text with no sources if the call fails
        """
        messages = [
            SystemMessage(content=ANSWER_SYSTEM_PROMPT),
            HumanMessage(content=prompt),
        ]
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            log_degraded(logger, "answer_generator", "apology text", exc=e)
            return LLMAnswer(text=GENERATION_FAILED_TEXT, sources=[])

        text = message_text(response.content)
        logger.info(f"{__name__}:generate - Generated answer_len={len(text)}")
        return LLMAnswer(text=text, sources=list(context.sources))

"""
Question intent classification.

Asks the chat model for exactly one label from the Intent set. Anything
other than an exact label, or a failed call, maps to the default intent.

Dependencies: langchain_core.messages, diaspora_assist.models
System role: Intent detection for workflow routing
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from diaspora_assist.boundary.llm.chat_model import message_text
from diaspora_assist.models.intent import Intent
from diaspora_assist.observability.log_utils import log_degraded

logger = logging.getLogger(__name__)

INTENT_SYSTEM_PROMPT = (
    "You classify user questions into predefined intents. "
    "Respond with ONLY one intent value."
)

INTENT_TEMPERATURE = 0.0
INTENT_MAX_OUTPUT_TOKENS = 10


def build_intent_prompt(question: str) -> str:
    labels = "\n".join(f"- {intent.value}" for intent in Intent)
    return (
        f"Classify the intent of the following question into ONE of:\n"
        f"{labels}\n\n"
        f'Question: "{question}"\n\n'
        f"Respond with ONLY the intent name."
    )


def parse_intent(raw: str) -> Intent | None:
    """Return the Intent whose value equals the trimmed, lower-cased reply."""
    try:
        return Intent(raw.strip().lower())
    except ValueError:
        return None


class IntentClassifier:
    """Map a free-text question to an Intent."""

    def __init__(self, model: BaseChatModel) -> None:
        """
        Args:
            model: Chat model configured with INTENT_TEMPERATURE and
                INTENT_MAX_OUTPUT_TOKENS
        """
        self._model = model

    async def classify(self, question: str) -> Intent:
        """
        Classify a question.

        Args:
            question: Question text

        Returns:
            Intent: Detected label, Intent.default() on failure
        """
        messages = [
            SystemMessage(content=INTENT_SYSTEM_PROMPT),
            HumanMessage(content=build_intent_prompt(question)),
        ]
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            log_degraded(logger, "intent_classifier", Intent.default().value, exc=e)
            return Intent.default()

        raw = message_text(response.content)
        intent = parse_intent(raw)
        if intent is None:
            log_degraded(
                logger,
                "intent_classifier",
                Intent.default().value,
                raw_label=raw[:50],
            )
            return Intent.default()

        logger.info(f"{__name__}:classify - intent={intent.value}")
        return intent

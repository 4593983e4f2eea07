"""
Best-effort translation with the hosted chat model.

Translation is fail-open: on any error, or an empty reply, the input text is
returned unchanged, so callers must treat the result as possibly
untranslated.

Dependencies: langchain_core.messages, diaspora_assist.boundary.llm
System role: Translation of questions, history and answers
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from diaspora_assist.boundary.llm.chat_model import message_text
from diaspora_assist.observability.log_utils import log_degraded

logger = logging.getLogger(__name__)

TRANSLATOR_SYSTEM_PROMPT = "You are a helpful translator."
TRANSLATION_TEMPERATURE = 0.0
TRANSLATION_MAX_OUTPUT_TOKENS = 1000

LANGUAGE_NAMES: dict[str, str] = {
    "fr": "French",
    "yo": "Yoruba",
    "ar": "Arabic",
    "sw": "Swahili",
    "am": "Amharic",
}

_ENGLISH_ALIASES = {"en", "english"}


def language_name(code: str) -> str:
    """Map a language code to its display name; unknown codes pass through."""
    return LANGUAGE_NAMES.get(code.lower(), code) if code else code


def is_english(code: str | None) -> bool:
    """True for a missing language or any spelling of English."""
    if not code:
        return True
    return code.strip().lower() in _ENGLISH_ALIASES


class Translator:
    """Translate text with the chat model."""

    def __init__(self, model: BaseChatModel) -> None:
        """
        Args:
            model: Chat model configured with TRANSLATION_TEMPERATURE and
                TRANSLATION_MAX_OUTPUT_TOKENS
        """
        self._model = model

    async def translate(self, text: str, target_language: str) -> str:
        """
        Translate text into a target language.

        Args:
            text: Text to translate
            target_language: Language name, e.g. "French"

        Returns:
            str: Translated text, or text unchanged on failure
        """
        if not text:
            return text

        messages = [
            SystemMessage(content=TRANSLATOR_SYSTEM_PROMPT),
            HumanMessage(content=f"Translate the following text to {target_language}:\n\n{text}"),
        ]
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            log_degraded(
                logger,
                "translator",
                "original text",
                exc=e,
                target_language=target_language,
            )
            return text

        translated = message_text(response.content).strip()
        if not translated:
            log_degraded(
                logger,
                "translator",
                "original text",
                target_language=target_language,
                reason="empty response",
            )
            return text
        return translated

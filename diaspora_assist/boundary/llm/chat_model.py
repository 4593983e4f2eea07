"""
Chat model factory for Google Gemini.

Every component that talks to the language model gets its own configured
instance (temperature, output cap) built here from shared settings, so the
clients are created once at startup and injected.

Dependencies: langchain_google_genai, diaspora_assist.configs
System role: Hosted language model adapter
"""

import logging
from typing import Any

from langchain_google_genai import ChatGoogleGenerativeAI

from diaspora_assist.configs.llm import LLMSettings

logger = logging.getLogger(__name__)


def create_chat_model(
    settings: LLMSettings,
    temperature: float,
    max_output_tokens: int,
) -> ChatGoogleGenerativeAI:
    """
    Build a Gemini chat model with a fixed sampling configuration.

    Args:
        settings: Language model settings
        temperature: Sampling temperature
        max_output_tokens: Output length cap

    Returns:
        ChatGoogleGenerativeAI: Configured chat model
    """
    kwargs: dict[str, Any] = {}
    if settings.google_api_key:
        kwargs["google_api_key"] = settings.google_api_key

    logger.info(
        f"{__name__}:create_chat_model - model={settings.model}, "
        f"temperature={temperature}, max_output_tokens={max_output_tokens}"
    )
    return ChatGoogleGenerativeAI(
        model=settings.model,
        temperature=temperature,
        max_output_tokens=max_output_tokens,
        **kwargs,
    )


def message_text(content: Any) -> str:
    """
    Flatten chat model content to plain text.

    Gemini may return either a string or a list of content parts.

    Args:
        content: AIMessage.content

    Returns:
        str: Concatenated text parts
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return str(content) if content is not None else ""

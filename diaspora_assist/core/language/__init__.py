"""
Language services: translation and speech transcription.
"""

from diaspora_assist.core.language.speech_to_text import SpeechTranscriber
from diaspora_assist.core.language.translator import (
    LANGUAGE_NAMES,
    Translator,
    is_english,
    language_name,
)

__all__ = ["SpeechTranscriber", "LANGUAGE_NAMES", "Translator", "is_english", "language_name"]

"""
Speech-to-text with Gemini.

Uploads the audio bytes inline to a multimodal Gemini model with a
transcription instruction. The audio file is always removed once the call
returns, whatever the outcome.

Dependencies: google.genai, asyncio
System role: Audio question transcription
"""

import asyncio
import logging
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING

from google.genai import types

from diaspora_assist.core.exceptions import EmptyAudioError
from diaspora_assist.observability.log_utils import log_degraded

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

TRANSCRIPTION_FALLBACK_TEXT = "[Mock transcription] Audio could not be processed."

_AUDIO_MIME_TYPES = {
    ".webm": "audio/webm",
    ".ogg": "audio/ogg",
    ".wav": "audio/wav",
    ".mp4": "audio/mp4",
    ".mp3": "audio/mpeg",
}


def guess_audio_mime_type(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in _AUDIO_MIME_TYPES:
        return _AUDIO_MIME_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "audio/webm"


def build_transcription_prompt(language: str) -> str:
    return (
        f"Transcribe this audio recording verbatim. The speaker is using language "
        f"code '{language}'. Return only the transcript text, without translation "
        f"or commentary."
    )


class SpeechTranscriber:
    """Transcribe uploaded audio questions."""

    def __init__(self, client: "genai.Client", model: str = "gemini-2.5-flash") -> None:
        """
        Args:
            client: Google Generative AI client
            model: Multimodal model used for transcription
        """
        self._client = client
        self._model = model

    async def transcribe(self, audio_path: str | Path, language: str = "en") -> str:
        """
        Transcribe an audio file and delete it.

        Args:
            audio_path: Path of the uploaded audio file
            language: Language code hint

        Returns:
            str: Transcript, or TRANSCRIPTION_FALLBACK_TEXT if the service fails

        Raises:
            EmptyAudioError: If the file is missing or has no content
        """
        path = Path(audio_path)
        try:
            if not path.is_file() or path.stat().st_size == 0:
                raise EmptyAudioError(str(path))

            audio_bytes = path.read_bytes()
            logger.info(
                f"{__name__}:transcribe - Processing audio size={len(audio_bytes)} bytes"
            )

            try:
                response = await asyncio.to_thread(
                    self._client.models.generate_content,
                    model=self._model,
                    contents=[
                        build_transcription_prompt(language or "en"),
                        types.Part.from_bytes(
                            data=audio_bytes,
                            mime_type=guess_audio_mime_type(path),
                        ),
                    ],
                )
                transcript = (response.text or "").strip()
            except Exception as e:
                log_degraded(logger, "speech_transcriber", "placeholder transcript", exc=e)
                return TRANSCRIPTION_FALLBACK_TEXT

            if not transcript:
                log_degraded(
                    logger,
                    "speech_transcriber",
                    "placeholder transcript",
                    reason="empty transcript",
                )
                return TRANSCRIPTION_FALLBACK_TEXT

            return transcript
        finally:
            try:
                path.unlink(missing_ok=True)
            except OSError as cleanup_error:
                logger.warning(
                    f"{__name__}:transcribe - Could not remove {path}: {cleanup_error}"
                )

"""Assistant API endpoints.

Routes:
- POST /question - Answer a text question in the user's language
- POST /audio - Answer a spoken question (multipart upload)
- POST /feedback - Attach a user rating to a previous answer

Dependencies: diaspora_assist.application.services.assistant_service
System role: Question answering HTTP API
"""

import logging
import uuid
from pathlib import Path

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from diaspora_assist.api.deps import get_assistant_service, get_settings_dependency
from diaspora_assist.application.services.assistant_service import AssistantService
from diaspora_assist.configs import Settings
from diaspora_assist.core.exceptions import ValidationError
from diaspora_assist.models.chat import (
    AnswerResponse,
    FeedbackRequest,
    FeedbackResponse,
    QuestionRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assistant"])

ALLOWED_AUDIO_EXTENSIONS = (".mp4", ".ogg", ".wav", ".webm")
DEFAULT_AUDIO_EXTENSION = ".webm"


def audio_extension(filename: str | None) -> str:
    """Pick the stored file extension from the client filename."""
    lower = (filename or "").lower()
    for extension in ALLOWED_AUDIO_EXTENSIONS:
        if lower.endswith(extension):
            return extension
    return DEFAULT_AUDIO_EXTENSION


def cleanup_temp_file(file_path: Path) -> None:
    """
    Safely remove an uploaded file.

    Args:
        file_path: Path to file to remove
    """
    try:
        if file_path.exists():
            file_path.unlink()
            logger.debug("Cleaned up temp file", extra={"file_path": str(file_path)})
    except OSError as e:
        logger.warning(
            "Failed to cleanup temp file",
            extra={"file_path": str(file_path), "error": str(e)},
        )


def _save_upload(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


@router.post("/question", response_model=AnswerResponse)
async def ask_question(
    request: QuestionRequest,
    assistant: AssistantService = Depends(get_assistant_service),
) -> AnswerResponse:
    """Answer a text question.

    Args:
        request: Question, optional language code and prior turns
        assistant: Injected AssistantService

    Returns:
        AnswerResponse: Answer in the user's language and detected intent

    Raises:
        HTTPException(500): Processing error
    """
    try:
        reply = await assistant.answer_question(
            request.question,
            request.language,
            request.conversation,
        )
    except Exception as e:
        logger.exception(
            "Question processing failed",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        raise HTTPException(status_code=500, detail="Internal server error")

    return AnswerResponse(answer=reply.answer, intent=reply.intent)


@router.post("/audio", response_model=AnswerResponse)
async def ask_audio(
    audio: UploadFile = File(...),
    language: str = Form("en"),
    assistant: AssistantService = Depends(get_assistant_service),
    settings: Settings = Depends(get_settings_dependency),
) -> AnswerResponse:
    """Answer a spoken question.

    Flow:
    1. Reject non-audio content types and oversized uploads
    2. Save the upload under the upload directory
    3. Transcribe, answer and translate through AssistantService
    4. Remove the saved file whatever happened

    Args:
        audio: Uploaded audio file (multipart form)
        language: Language code of the recording
        assistant: Injected AssistantService
        settings: Injected settings

    Returns:
        AnswerResponse: Answer in the user's language and detected intent

    Raises:
        HTTPException(400): Not an audio file, or empty audio
        HTTPException(413): Upload larger than the configured limit
        HTTPException(500): Processing error
    """
    if not (audio.content_type or "").startswith("audio/"):
        raise HTTPException(status_code=400, detail="Only audio files are allowed")

    max_bytes = settings.storage.max_upload_bytes
    data = await audio.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise HTTPException(status_code=413, detail="Audio file too large")

    file_path = Path(settings.storage.upload_dir) / (
        f"audio-{uuid.uuid4().hex}{audio_extension(audio.filename)}"
    )

    try:
        await run_in_threadpool(_save_upload, file_path, data)
        logger.info(
            "Audio file received",
            extra={
                "original_name": audio.filename,
                "content_type": audio.content_type,
                "size_bytes": len(data),
            },
        )
        reply = await assistant.answer_audio(file_path, language)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.exception(
            "Audio processing failed",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        raise HTTPException(status_code=500, detail="Internal server error")
    finally:
        cleanup_temp_file(file_path)

    return AnswerResponse(answer=reply.answer, intent=reply.intent)


@router.post("/feedback", response_model=FeedbackResponse)
async def submit_feedback(
    request: FeedbackRequest,
    assistant: AssistantService = Depends(get_assistant_service),
) -> FeedbackResponse:
    """Attach a user rating to a previous answer.

    An unmatched rating is logged and dropped; the response is the same.

    Raises:
        HTTPException(500): Feedback log could not be updated
    """
    try:
        await assistant.submit_feedback(request.question, request.answer, request.rating)
    except Exception as e:
        logger.exception(
            "Feedback processing failed",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        raise HTTPException(status_code=500, detail="Internal server error")

    return FeedbackResponse(status="ok")

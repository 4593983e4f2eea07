"""
Test suite for the assistant endpoints.

Services are replaced through app.dependency_overrides; no model is called.

System role: Verification of the HTTP contract
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from diaspora_assist.api.deps import get_assistant_service, get_settings_dependency
from diaspora_assist.api.routers.assistant import audio_extension
from diaspora_assist.application.services.assistant_service import AssistantService
from diaspora_assist.configs import Settings
from diaspora_assist.configs.storage import StorageSettings
from diaspora_assist.core.language.speech_to_text import SpeechTranscriber
from diaspora_assist.main import create_app
from diaspora_assist.models.chat import AssistantReply
from diaspora_assist.models.evaluation import Evaluation
from diaspora_assist.models.intent import Intent
from tests.doubles import UK_ANSWER, UK_QUESTION

REPLY = AssistantReply(
    answer=UK_ANSWER,
    intent=Intent.VISA_ELIGIBILITY,
    sources=["uk_visa_faq.txt"],
    evaluation=Evaluation(
        overall_score=1.0,
        legal_accuracy=1.0,
        completeness=0.8,
        clarity=0.8,
        actionability=0.7,
        translation_quality=1.0,
    ),
)


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir) -> Settings:
    return Settings(storage=StorageSettings(upload_dir=str(upload_dir), max_upload_bytes=64))


@pytest.fixture
def assistant() -> MagicMock:
    """Provide a mocked assistant service."""
    service = MagicMock(spec=AssistantService)
    service.answer_question = AsyncMock(return_value=REPLY)
    service.answer_audio = AsyncMock(return_value=REPLY)
    service.submit_feedback = AsyncMock(return_value=True)
    return service


@pytest.fixture
def client(assistant: MagicMock, settings: Settings):
    """Provide a test client with overridden dependencies (lifespan not run)."""
    app = create_app()
    app.dependency_overrides[get_assistant_service] = lambda: assistant
    app.dependency_overrides[get_settings_dependency] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestQuestionEndpoint:
    """Test suite for POST /api/question."""

    def test_should_return_answer_and_intent(self, client: TestClient, assistant: MagicMock) -> None:
        response = client.post("/api/question", json={"question": UK_QUESTION, "language": "en"})

        assert response.status_code == 200
        assert response.json() == {"answer": UK_ANSWER, "intent": "visa_eligibility"}
        assistant.answer_question.assert_awaited_once_with(UK_QUESTION, "en", [])

    def test_should_pass_conversation_turns(self, client: TestClient, assistant: MagicMock) -> None:
        payload = {
            "question": "Et pour ma famille ?",
            "language": "fr",
            "conversation": [{"question": "Quel visa ?", "answer": "Skilled Worker"}],
        }

        client.post("/api/question", json=payload)

        turns = assistant.answer_question.call_args.args[2]
        assert turns[0].question == "Quel visa ?"

    def test_should_reject_empty_question(self, client: TestClient) -> None:
        assert client.post("/api/question", json={"question": ""}).status_code == 422

    def test_should_hide_processing_errors(self, client: TestClient, assistant: MagicMock) -> None:
        assistant.answer_question.side_effect = RuntimeError("boom")

        response = client.post("/api/question", json={"question": UK_QUESTION})

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestAudioEndpoint:
    """Test suite for POST /api/audio."""

    def test_should_answer_audio_and_remove_upload(
        self, client: TestClient, assistant: MagicMock, upload_dir
    ) -> None:
        """Test a valid upload is saved with its extension, answered and removed."""
        response = client.post(
            "/api/audio",
            files={"audio": ("question.ogg", b"OggS fake audio", "audio/ogg")},
            data={"language": "fr"},
        )

        assert response.status_code == 200
        assert response.json()["intent"] == "visa_eligibility"
        saved_path, language = assistant.answer_audio.call_args.args
        assert saved_path.suffix == ".ogg"
        assert saved_path.parent == upload_dir
        assert language == "fr"
        assert list(upload_dir.iterdir()) == []

    def test_should_reject_non_audio_content_type(self, client: TestClient, assistant: MagicMock) -> None:
        response = client.post(
            "/api/audio",
            files={"audio": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assistant.answer_audio.assert_not_awaited()

    def test_should_reject_oversized_upload(self, client: TestClient, upload_dir) -> None:
        response = client.post(
            "/api/audio",
            files={"audio": ("big.wav", b"x" * 65, "audio/wav")},
        )

        assert response.status_code == 413
        assert list(upload_dir.iterdir()) == []

    def test_empty_audio_should_return_400_and_leave_no_file(self, settings: Settings, upload_dir) -> None:
        """Test an empty upload fails validation in the transcriber and is removed."""
        genai_client = MagicMock()
        service = AssistantService(
            router=MagicMock(),
            translator=MagicMock(),
            transcriber=SpeechTranscriber(genai_client),
            evaluator=MagicMock(),
            feedback_store=MagicMock(),
        )
        app = create_app()
        app.dependency_overrides[get_assistant_service] = lambda: service
        app.dependency_overrides[get_settings_dependency] = lambda: settings

        response = TestClient(app).post(
            "/api/audio",
            files={"audio": ("empty.webm", b"", "audio/webm")},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Audio file is empty"}
        assert list(upload_dir.iterdir()) == []
        genai_client.models.generate_content.assert_not_called()

    def test_should_hide_processing_errors(self, client: TestClient, assistant: MagicMock, upload_dir) -> None:
        assistant.answer_audio.side_effect = RuntimeError("boom")

        response = client.post(
            "/api/audio",
            files={"audio": ("question.wav", b"RIFF fake", "audio/wav")},
        )

        assert response.status_code == 500
        assert list(upload_dir.iterdir()) == []

    @pytest.mark.parametrize(
        "filename, expected",
        [("a.MP4", ".mp4"), ("a.wav", ".wav"), ("a.ogg", ".ogg"), ("a.m4a", ".webm"), (None, ".webm")],
    )
    def test_audio_extension(self, filename, expected: str) -> None:
        assert audio_extension(filename) == expected


class TestFeedbackEndpoint:
    """Test suite for POST /api/feedback."""

    def test_should_record_rating(self, client: TestClient, assistant: MagicMock) -> None:
        response = client.post(
            "/api/feedback",
            json={"question": UK_QUESTION, "answer": UK_ANSWER, "sources": [], "rating": 4},
        )

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assistant.submit_feedback.assert_awaited_once_with(UK_QUESTION, UK_ANSWER, 4)

    def test_unmatched_rating_should_still_succeed(self, client: TestClient, assistant: MagicMock) -> None:
        assistant.submit_feedback.return_value = False

        response = client.post(
            "/api/feedback",
            json={"question": "q", "answer": "a", "rating": 1},
        )

        assert response.json() == {"status": "ok"}

    def test_should_reject_out_of_range_rating(self, client: TestClient) -> None:
        response = client.post("/api/feedback", json={"question": "q", "answer": "a", "rating": 6})

        assert response.status_code == 422

    def test_should_hide_storage_errors(self, client: TestClient, assistant: MagicMock) -> None:
        assistant.submit_feedback.side_effect = OSError("disk full")

        response = client.post("/api/feedback", json={"question": "q", "answer": "a", "rating": 3})

        assert response.status_code == 500

"""
Feedback log persisted as a single JSON document.

Every automatic evaluation is appended as a FeedbackEntry; a later user
rating is attached to the most recent entry with the same question and
answer. Writers are serialized through one asyncio.Lock per store and each
write replaces the file atomically, so concurrent requests cannot lose
each other's appends within a process.

Dependencies: pydantic, diaspora_assist.models
System role: Append-only feedback log
"""

import asyncio
import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter

from diaspora_assist.models.feedback import FeedbackEntry
from diaspora_assist.models.rag import LLMAnswer
from diaspora_assist.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[FeedbackEntry])


class FeedbackStore:
    """Append-only feedback log backed by one JSON file."""

    def __init__(self, path: str | Path) -> None:
        """
        Args:
            path: JSON file holding the feedback array (created on first write)
        """
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> list[FeedbackEntry]:
        if not self._path.exists():
            return []
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return []
        return _entries_adapter.validate_json(raw)

    def _write(self, entries: list[FeedbackEntry]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(
            [entry.model_dump(mode="json") for entry in entries],
            indent=2,
            ensure_ascii=False,
        )
        fd, tmp_path = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(payload)
            os.replace(tmp_path, self._path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    async def read_entries(self) -> list[FeedbackEntry]:
        """
        Read every stored entry in insertion order.

        Returns:
            list[FeedbackEntry]: All entries (empty if the file does not exist)
        """
        return await asyncio.to_thread(self._read)

    async def record_automatic(
        self,
        answer: LLMAnswer,
        question: str,
        score: float,
        reason: str,
        language: str | None = None,
    ) -> FeedbackEntry:
        """
        Append an automatically evaluated answer to the log.

        Args:
            answer: Final answer returned to the user
            question: Question as the user asked it
            score: Overall evaluation score
            reason: Evaluation reasons
            language: User language code

        Returns:
            FeedbackEntry: The stored entry

        Raises:
            OSError: If the file cannot be read or written
        """
        entry = FeedbackEntry(
            question=question,
            answer=answer.text,
            sources=list(answer.sources),
            ai_score=score,
            ai_reason=reason,
            timestamp=datetime.now(timezone.utc).isoformat(),
            language=language,
        )

        async with self._lock:
            entries = await asyncio.to_thread(self._read)
            entries.append(entry)
            await asyncio.to_thread(self._write, entries)

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:record_automatic - Stored feedback entry",
            entry_count=len(entries),
            ai_score=score,
        )
        return entry

    async def record_user_rating(self, question: str, answer_text: str, rating: int) -> bool:
        """
        Attach a user rating to the most recent matching entry.

        Args:
            question: Question text, compared exactly
            answer_text: Answer text, compared exactly
            rating: Rating (1-5)

        Returns:
            bool: False if no entry matched (the file is left untouched)

        Raises:
            OSError: If the file cannot be read or written
        """
        async with self._lock:
            entries = await asyncio.to_thread(self._read)

            for entry in reversed(entries):
                if entry.question == question and entry.answer == answer_text:
                    entry.user_rating = rating
                    break
            else:
                log_with_context(
                    logger,
                    logging.WARNING,
                    f"{__name__}:record_user_rating - No matching entry, rating dropped",
                    question_preview=question[:80],
                    rating=rating,
                )
                return False

            await asyncio.to_thread(self._write, entries)

        logger.info(f"{__name__}:record_user_rating - Rating {rating} stored")
        return True

"""
RAG request pipeline.

Load -> chunk -> index -> retrieve -> prompt -> generate. The corpus is
indexed before the first question and, when reindex_on_request is set,
before every question so edits to the corpus directory are picked up.
Indexing and retrieval share one asyncio.Lock: a search never sees a
half-rewritten index and two re-indexes never interleave. Generation runs
outside the lock.

Dependencies: fastapi.concurrency, diaspora_assist.core.rag
System role: RAG orchestration for one question
"""

import asyncio
import logging

from fastapi.concurrency import run_in_threadpool

from diaspora_assist.boundary.vdb.vector_store_factory import VectorStore
from diaspora_assist.core.rag.answer_generator import AnswerGenerator
from diaspora_assist.core.rag.chunker import DocumentChunker
from diaspora_assist.core.rag.context_retriever import ContextRetriever
from diaspora_assist.core.rag.document_loader import DocumentLoader
from diaspora_assist.core.rag.prompt_builder import build_prompt
from diaspora_assist.models.chat import ConversationTurn
from diaspora_assist.models.rag import LLMAnswer
from diaspora_assist.observability.log_utils import log_degraded

logger = logging.getLogger(__name__)

PIPELINE_FAILED_TEXT = "Sorry, something went wrong while processing your request."


class RAGPipeline:
    """Answer a question from the document corpus."""

    def __init__(
        self,
        loader: DocumentLoader,
        chunker: DocumentChunker,
        vector_store: VectorStore,
        retriever: ContextRetriever,
        generator: AnswerGenerator,
        reindex_on_request: bool = True,
    ) -> None:
        self._loader = loader
        self._chunker = chunker
        self._vector_store = vector_store
        self._retriever = retriever
        self._generator = generator
        self._reindex_on_request = reindex_on_request
        self._indexed = False
        self._index_lock = asyncio.Lock()

    async def index_corpus(self) -> int:
        """
        Load, chunk and upsert the whole corpus.

        Returns:
            int: Number of chunks written

        Raises:
            VectorStoreError: When the upsert fails
        """
        async with self._index_lock:
            return await self._index_unlocked()

    async def _index_unlocked(self) -> int:
        documents = await run_in_threadpool(self._loader.load)
        chunks = self._chunker.chunk(documents)
        ids = await run_in_threadpool(self._vector_store.index, chunks)
        self._indexed = True
        logger.info(
            f"{__name__}:index_corpus - Indexed {len(ids)} chunks from {len(documents)} documents"
        )
        return len(ids)

    async def ask(
        self,
        query: str,
        language: str = "English",
        conversation: list[ConversationTurn] | None = None,
    ) -> LLMAnswer:
        """
        Answer a question with retrieved context.

        Args:
            query: Question text
            language: Language name the answer should be written in
            conversation: Prior turns in chronological order

        Returns:
            LLMAnswer: Generated answer, or the fixed apology with no
                sources if any stage fails
        """
        try:
            async with self._index_lock:
                if self._reindex_on_request or not self._indexed:
                    await self._index_unlocked()
                context = await self._retriever.retrieve(query)

            prompt = build_prompt(query, context, language, conversation)
            return await self._generator.generate(prompt, context)
        except Exception as e:
            log_degraded(
                logger,
                "rag_pipeline",
                "apology text",
                exc=e,
                query_preview=query[:80],
            )
            return LLMAnswer(text=PIPELINE_FAILED_TEXT, sources=[])

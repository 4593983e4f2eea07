"""
Retrieval-augmented generation.

Loader, chunker, context retriever, prompt builder, answer generator and
the pipeline that composes them.
"""

from diaspora_assist.core.rag.answer_generator import AnswerGenerator
from diaspora_assist.core.rag.chunker import DocumentChunker
from diaspora_assist.core.rag.context_retriever import ContextRetriever, build_context
from diaspora_assist.core.rag.document_loader import DocumentLoader, infer_metadata_from_filename
from diaspora_assist.core.rag.pipeline import RAGPipeline
from diaspora_assist.core.rag.prompt_builder import CITATION_PATTERN, build_prompt, format_citation

__all__ = [
    "AnswerGenerator",
    "DocumentChunker",
    "ContextRetriever",
    "build_context",
    "DocumentLoader",
    "infer_metadata_from_filename",
    "RAGPipeline",
    "CITATION_PATTERN",
    "build_prompt",
    "format_citation",
]

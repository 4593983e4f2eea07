"""
Core business logic module.

RAG pipeline, workflow routing, language services and answer evaluation.
"""

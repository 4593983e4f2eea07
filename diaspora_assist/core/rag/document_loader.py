"""
Plain-text document loader.

Reads every .txt file in the corpus directory into a LangChain Document and
attaches provenance metadata inferred from the filename.

Dependencies: langchain_community.document_loaders, langchain_core
System role: First stage of the RAG pipeline
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from langchain_community.document_loaders import TextLoader
from langchain_core.documents import Document

logger = logging.getLogger(__name__)

# First matching substring wins.
_FILENAME_CATEGORIES: list[tuple[str, dict[str, str]]] = [
    ("uk", {"country": "UK", "domain": "immigration"}),
    ("canada", {"country": "Canada", "domain": "immigration"}),
    ("diaspora", {"country": "Global", "domain": "diaspora_services"}),
]
_DEFAULT_CATEGORY = {"country": "Unknown", "domain": "general"}


def infer_metadata_from_filename(filename: str) -> dict[str, str]:
    """
    Infer country and domain from a corpus filename.

    Args:
        filename: File name, e.g. "uk_visa_faq.txt"

    Returns:
        dict[str, str]: {"country": ..., "domain": ...}
    """
    lower = filename.lower()
    for marker, category in _FILENAME_CATEGORIES:
        if marker in lower:
            return dict(category)
    return dict(_DEFAULT_CATEGORY)


class DocumentLoader:
    """Load the .txt corpus from a directory."""

    def __init__(self, documents_dir: str | Path = "data/documents") -> None:
        """
        Args:
            documents_dir: Directory containing the plain-text corpus
        """
        self._documents_dir = Path(documents_dir)

    @property
    def documents_dir(self) -> Path:
        return self._documents_dir

    def load(self) -> list[Document]:
        """
        Load every .txt file, sorted by name.

        Returns:
            list[Document]: One Document per file with source, country,
                domain and ingested_at metadata

        Raises:
            RuntimeError: When a file cannot be read as UTF-8 text
        """
        if not self._documents_dir.is_dir():
            logger.warning(
                f"{__name__}:load - Documents directory not found: {self._documents_dir}"
            )
            return []

        documents: list[Document] = []
        for path in sorted(self._documents_dir.glob("*.txt")):
            if not path.is_file():
                continue

            loaded = TextLoader(str(path), encoding="utf-8").load()
            content = "".join(doc.page_content for doc in loaded)

            documents.append(
                Document(
                    page_content=content,
                    metadata={
                        "source": path.name,
                        **infer_metadata_from_filename(path.name),
                        "ingested_at": datetime.now(timezone.utc).isoformat(),
                    },
                )
            )

        logger.info(
            f"{__name__}:load - Loaded {len(documents)} documents from {self._documents_dir}"
        )
        return documents

"""
S3 Vectors store for production retrieval.

Provides index/search over Amazon S3 Vectors. The configured namespace is
used as the index name inside the vectors bucket. Every call is attempted
once; failures are wrapped and propagated to the caller.

Dependencies: langchain_aws, botocore, diaspora_assist.boundary.vdb
System role: Production vector store (S3 Vectors)
"""

import logging

from botocore.exceptions import ClientError
from langchain_aws.vectorstores import AmazonS3Vectors
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from diaspora_assist.boundary.vdb.vector_schemas import (
    VectorSearchResult,
    generate_chunk_id,
    to_search_result,
)
from diaspora_assist.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class S3VectorsStore:
    """
    S3 Vectors store for production retrieval.

    Wraps AmazonS3Vectors. Upserts are keyed by deterministic chunk IDs so
    the hosted index overwrites existing vectors on re-indexing.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        vectors_bucket: str = "diaspora-assist-vectors",
        namespace: str = "immigration-docs",
        region: str = "eu-west-2",
    ) -> None:
        """
        Initialize S3 Vectors store.

        Args:
            embeddings: Embedding model used for chunks and queries
            vectors_bucket: S3 Vectors bucket name
            namespace: Index name within the bucket
            region: AWS region for S3 Vectors
        """
        self._vectors_bucket = vectors_bucket
        self._namespace = namespace
        self._region = region

        self._vector_store = AmazonS3Vectors(
            vector_bucket_name=vectors_bucket,
            index_name=namespace,
            embedding=embeddings,
            region_name=region,
        )
        logger.info(
            f"{__name__}:__init__ - S3 Vectors store ready",
            extra={"bucket": vectors_bucket, "namespace": namespace, "region": region},
        )

    @property
    def namespace(self) -> str:
        """Index name vectors are upserted into."""
        return self._namespace

    def index(self, chunks: list[Document]) -> list[str]:
        """
        Embed and upsert chunks into the namespace.

        Args:
            chunks: Chunk documents with source/chunk_index metadata

        Returns:
            list[str]: Chunk IDs written

        Raises:
            VectorStoreError: If embedding or the put call fails
        """
        if not chunks:
            return []

        ids = [generate_chunk_id(chunk.metadata) for chunk in chunks]
        metadatas = [
            {**chunk.metadata, "chunk_id": chunk_id}
            for chunk, chunk_id in zip(chunks, ids)
        ]

        try:
            self._vector_store.add_texts(
                texts=[chunk.page_content for chunk in chunks],
                metadatas=metadatas,
                ids=ids,
            )
        except ClientError as e:
            logger.error(f"{__name__}:index - ClientError: {e}")
            raise VectorStoreError(
                message="S3 Vectors rejected the upsert",
                operation="index",
                details={"error": str(e), "chunk_count": len(chunks)},
            ) from e
        except Exception as e:
            logger.error(f"{__name__}:index - {type(e).__name__}: {e}")
            raise VectorStoreError(
                message="Failed to index chunks into S3 Vectors",
                operation="index",
                details={"error": str(e), "chunk_count": len(chunks)},
            ) from e

        logger.info(
            f"{__name__}:index - Upserted {len(ids)} chunks",
            extra={"namespace": self._namespace},
        )
        return ids

    def search(self, query: str, k: int = 4) -> list[VectorSearchResult]:
        """
        Embed the query and return the k nearest chunks.

        Args:
            query: Search query text
            k: Number of results to return

        Returns:
            list[VectorSearchResult]: Search results with scores and metadata

        Raises:
            VectorStoreError: If embedding or the query call fails
        """
        try:
            results = self._vector_store.similarity_search_with_score(query=query, k=k)
        except Exception as e:
            logger.error(f"{__name__}:search - {type(e).__name__}: {e}")
            raise VectorStoreError(
                message="Failed to search S3 Vectors index",
                operation="search",
                details={"error": str(e), "k": k},
            ) from e

        search_results = [to_search_result(doc, score) for doc, score in results]
        logger.info(
            f"{__name__}:search - Found {len(search_results)} results",
            extra={"namespace": self._namespace, "k": k},
        )
        return search_results

"""Retrieval-based selection of the context sent for generation."""

import logging
import threading
from uuid import uuid4

from quizlit.config import ChunkingConfig, RetrievalConfig
from quizlit.errors import EmbeddingError, raise_if_cancelled
from quizlit.models.chunk import Chunk
from quizlit.retrieval.chunker import TextChunker
from quizlit.retrieval.embedding import Embedder, HashEmbedding
from quizlit.retrieval.index import RetrievalIndex

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n"


class ContextSelector:
    """Curates a bounded context from the most relevant chunks of a document.

    Every ``select`` call builds its own private RetrievalIndex, so
    concurrent requests never see each other's chunks.

    Args:
        chunking: Chunk size and overlap settings.
        retrieval: Top-K, byte budget and default query settings.
        embedder: Embedding provider; defaults to HashEmbedding.
    """

    def __init__(
        self,
        chunking: ChunkingConfig,
        retrieval: RetrievalConfig,
        embedder: Embedder | None = None,
    ) -> None:
        self._chunker = TextChunker(chunking)
        self._retrieval = retrieval
        self._embedder = embedder or HashEmbedding()

    def _embed(self, text: str) -> list[float]:
        """Embed text, reporting any provider failure as EmbeddingError."""
        try:
            return self._embedder.embed(text)
        except EmbeddingError:
            raise
        except Exception as e:
            raise EmbeddingError(f"Embedding provider failed: {e}") from e

    def build_index(
        self, document_id: str, text: str, index: RetrievalIndex | None = None
    ) -> RetrievalIndex:
        """Chunk, embed and upsert a document.

        Args:
            document_id: Caller-supplied id; chunk ids are ``<id>:<seq>``.
            text: Document text.
            index: Existing index to populate, or None for a new one.

        Returns:
            The populated index.

        Raises:
            EmbeddingError: If the embedder fails on any chunk.
        """
        index = index if index is not None else RetrievalIndex()
        for seq, chunk_text in enumerate(self._chunker.chunk(text)):
            index.upsert(
                Chunk(
                    id=f"{document_id}:{seq}",
                    text=chunk_text,
                    embedding=self._embed(chunk_text),
                )
            )
        return index

    def select(
        self,
        document_text: str,
        query: str = "",
        top_k: int | None = None,
        max_context_bytes: int | None = None,
        document_id: str | None = None,
        cancel_event: threading.Event | None = None,
    ) -> str:
        """Return the curated context for a query.

        Falls back to ``document_text`` unchanged when indexing fails or
        when no chunk fits the byte budget.

        Args:
            document_text: The full source text.
            query: Retrieval query; blank means the configured default.
            top_k: Chunks to retrieve; None or <= 0 means the configured value.
            max_context_bytes: UTF-8 byte budget for the joined context.
            document_id: Id used to scope chunk ids; random when omitted.
            cancel_event: Set by the caller to abandon the request.

        Returns:
            Chunk texts in relevance order joined by blank lines.
        """
        if top_k is None or top_k <= 0:
            top_k = self._retrieval.top_k
        if max_context_bytes is None:
            max_context_bytes = self._retrieval.max_context_bytes
        query = query.strip() or self._retrieval.default_query
        document_id = document_id or str(uuid4())

        try:
            index = self.build_index(document_id, document_text)
            raise_if_cancelled(cancel_event, "context selection")
            top = index.top_k(self._embed(query), top_k)
        except EmbeddingError as e:
            logger.warning("Retrieval indexing failed, using full text: %s", e)
            return document_text

        parts: list[str] = []
        total = 0
        sep_bytes = len(CONTEXT_SEPARATOR.encode("utf-8"))
        for chunk in top:
            text = chunk.text.strip()
            size = len(text.encode("utf-8")) + (sep_bytes if parts else 0)
            if total + size > max_context_bytes:
                break
            parts.append(text)
            total += size

        if not parts:
            logger.warning("No chunk fits in %d bytes, using full text", max_context_bytes)
            return document_text

        context = CONTEXT_SEPARATOR.join(parts)
        logger.info(
            "Selected %d of %d retrieved chunks (%d chars) from %d indexed",
            len(parts),
            len(top),
            len(context),
            len(index),
        )
        return context

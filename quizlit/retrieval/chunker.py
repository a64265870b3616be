"""Deterministic overlapping text chunker."""

import logging
import re

from quizlit.config import ChunkingConfig

logger = logging.getLogger(__name__)

# Sentence-like delimiters: a newline, or a space following terminal
# punctuation. The punctuation stays attached to its fragment.
FRAGMENT_DELIMITER = re.compile(r"\n|(?<=[.?!]) ")


def split_fragments(text: str) -> list[str]:
    """Split text into atomic, non-empty sentence-like fragments.

    Args:
        text: The text to split.

    Returns:
        Stripped fragments in document order.
    """
    fragments = []
    for part in FRAGMENT_DELIMITER.split(text):
        part = part.strip()
        if part:
            fragments.append(part)
    return fragments


class TextChunker:
    """Packs sentence fragments into bounded chunks with trailing overlap.

    Fragments are never split, so a chunk only exceeds ``chunk_size``
    when a single fragment is longer than that on its own. After a flush
    the next chunk is seeded with the last ``chunk_overlap`` characters of
    the flushed one, trimmed forward to a word boundary, unless the seed
    would push the next fragment over the size limit.

    Args:
        config: ChunkingConfig with chunk_size and chunk_overlap.
    """

    def __init__(self, config: ChunkingConfig) -> None:
        self._config = config

    def chunk(self, text: str) -> list[str]:
        """Split text into overlapping chunks.

        Args:
            text: The document text.

        Returns:
            Chunk texts in document order; empty for blank input.
        """
        size = self._config.chunk_size
        overlap = self._config.chunk_overlap
        chunks: list[str] = []
        buffer = ""

        for fragment in split_fragments(text):
            if buffer and len(buffer) + 1 + len(fragment) > size:
                flushed = buffer.strip()
                chunks.append(flushed)
                buffer = ""
                if overlap > 0 and len(flushed) > overlap:
                    seed = flushed[-overlap:]
                    # Never start the seed inside a word
                    if not flushed[-overlap - 1].isspace() and not seed[0].isspace():
                        seed = seed.partition(" ")[2]
                    seed = seed.strip()
                    if seed and len(seed) + 1 + len(fragment) <= size:
                        buffer = seed
            buffer = f"{buffer} {fragment}" if buffer else fragment

        if buffer.strip():
            chunks.append(buffer.strip())

        logger.debug("Chunked %d characters into %d chunks", len(text), len(chunks))
        return chunks

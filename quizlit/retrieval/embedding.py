"""Embedding providers for the retrieval index."""

import hashlib
import math
from typing import Protocol, runtime_checkable

HASH_EMBEDDING_DIM = 32


@runtime_checkable
class Embedder(Protocol):
    """Anything that turns text into a fixed-dimension vector.

    Implementations should raise ``EmbeddingError`` when they fail, so
    that context selection can fall back to the uncurated text.
    """

    def embed(self, text: str) -> list[float]: ...


class HashEmbedding:
    """Deterministic placeholder embedding derived from a SHA-1 digest.

    This keeps the retrieval pipeline functional without an embedding
    model. The vectors carry no semantic meaning: similar texts do not
    get similar vectors, so ranking quality is not guaranteed. Swap in a
    real embedding model for meaningful retrieval.
    """

    def __init__(self, dim: int = HASH_EMBEDDING_DIM) -> None:
        self.dim = dim

    def embed(self, text: str) -> list[float]:
        digest = hashlib.sha1(text.encode("utf-8")).digest()
        vec = [digest[i % len(digest)] / 255.0 for i in range(self.dim)]
        norm = math.sqrt(sum(v * v for v in vec)) or 1.0
        return [v / norm for v in vec]

"""In-memory similarity index over chunk embeddings."""

import math
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from quizlit.models.chunk import Chunk


def cosine_similarity(a: list[float], b: list[float]) -> float:
    """Cosine similarity over the overlapping prefix of two vectors.

    Returns 0.0 when either vector is empty or has zero norm.
    """
    if not a or not b:
        return 0.0
    n = min(len(a), len(b))
    dot = na = nb = 0.0
    for i in range(n):
        dot += a[i] * b[i]
        na += a[i] * a[i]
        nb += b[i] * b[i]
    denom = math.sqrt(na) * math.sqrt(nb)
    if denom == 0:
        return 0.0
    # Clamp float drift so results stay within [-1, 1]
    return max(-1.0, min(1.0, dot / denom))


class ReadWriteLock:
    """Many concurrent readers or one exclusive writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class RetrievalIndex:
    """Upsert-only collection of chunks ranked by cosine similarity.

    Safe to share between threads: lookups run concurrently, upserts and
    resets are exclusive. Prefer one index per generation call.
    """

    def __init__(self) -> None:
        self._items: list[Chunk] = []
        self._positions: dict[str, int] = {}
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._items)

    def upsert(self, chunk: Chunk) -> None:
        """Insert a chunk, replacing any existing chunk with the same id."""
        with self._lock.write():
            pos = self._positions.get(chunk.id)
            if pos is None:
                self._positions[chunk.id] = len(self._items)
                self._items.append(chunk)
            else:
                self._items[pos] = chunk

    def top_k(self, query_embedding: list[float], k: int) -> list[Chunk]:
        """Return up to k chunks by descending similarity.

        Ties keep insertion order.
        """
        if k <= 0:
            return []
        with self._lock.read():
            scored = [
                (cosine_similarity(query_embedding, item.embedding), item)
                for item in self._items
            ]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [item for _, item in scored[:k]]

    def reset(self) -> None:
        """Drop every chunk."""
        with self._lock.write():
            self._items.clear()
            self._positions.clear()

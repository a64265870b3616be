"""Chunking, embedding and similarity retrieval."""

from quizlit.retrieval.chunker import TextChunker, split_fragments
from quizlit.retrieval.embedding import Embedder, HashEmbedding
from quizlit.retrieval.index import RetrievalIndex, cosine_similarity
from quizlit.retrieval.selector import ContextSelector

__all__ = [
    "ContextSelector",
    "Embedder",
    "HashEmbedding",
    "RetrievalIndex",
    "TextChunker",
    "cosine_similarity",
    "split_fragments",
]

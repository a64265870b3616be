"""Data models for the Quizlit quiz generator."""

from quizlit.models.chunk import Chunk
from quizlit.models.quiz import (
    TRUE_FALSE_OPTIONS,
    Provenance,
    Question,
    QuestionType,
    Quiz,
)
from quizlit.models.request import GenerationRequest, RawQuestionRecord

__all__ = [
    "TRUE_FALSE_OPTIONS",
    "Chunk",
    "GenerationRequest",
    "Provenance",
    "Question",
    "QuestionType",
    "Quiz",
    "RawQuestionRecord",
]

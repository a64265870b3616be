"""Question and quiz data models."""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

TRUE_FALSE_OPTIONS = ["True", "False"]


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"


class Provenance(str, Enum):
    """Which strategy produced a question."""

    BACKEND = "backend"
    RULE_BASED = "rule-based"


class Question(BaseModel):
    """A single quiz question.

    Multiple-choice questions carry exactly four options and a
    ``correct_answer_index``; true/false questions carry the options
    ``["True", "False"]`` and a ``correct_label``.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    text: str
    type: QuestionType
    options: list[str]
    correct_answer_index: int | None = None
    correct_label: str | None = None
    explanation: str = ""
    points: int = 1
    source: Provenance

    @model_validator(mode="after")
    def _check_shape(self) -> "Question":
        if self.type is QuestionType.MULTIPLE_CHOICE:
            if len(self.options) != 4:
                raise ValueError("multiple-choice questions need exactly 4 options")
            if self.correct_answer_index is None or not 0 <= self.correct_answer_index < 4:
                raise ValueError("correct_answer_index must be between 0 and 3")
        else:
            if self.options != TRUE_FALSE_OPTIONS:
                raise ValueError("true/false options must be ['True', 'False']")
            if self.correct_label not in TRUE_FALSE_OPTIONS:
                raise ValueError("correct_label must be 'True' or 'False'")
        return self

    @property
    def correct(self) -> int | str:
        """The correct answer: an index for multiple-choice, a label otherwise."""
        if self.type is QuestionType.MULTIPLE_CHOICE:
            return self.correct_answer_index  # type: ignore[return-value]
        return self.correct_label  # type: ignore[return-value]

    @property
    def correct_text(self) -> str:
        if self.type is QuestionType.MULTIPLE_CHOICE:
            return self.options[self.correct_answer_index]  # type: ignore[index]
        return self.correct_label  # type: ignore[return-value]


class Quiz(BaseModel):
    """A generated quiz with its ordered questions."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    description: str = ""
    questions: list[Question] = Field(default_factory=list)
    difficulty: str = "medium"
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    total_questions: int = -1

    @model_validator(mode="after")
    def _sync_total(self) -> "Quiz":
        if self.total_questions == -1:
            self.total_questions = len(self.questions)
        elif self.total_questions != len(self.questions):
            raise ValueError(
                f"total_questions={self.total_questions} does not match "
                f"{len(self.questions)} questions"
            )
        return self

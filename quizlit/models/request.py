"""Generation request and raw backend record models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerationRequest(BaseModel):
    """Everything the caller supplies to generate one quiz.

    A ``question_count`` of 0 means "use the configured default".
    """

    title: str = ""
    description: str = ""
    difficulty: str = "medium"
    source_text: str
    question_count: int = Field(default=0, ge=0)


class RawQuestionRecord(BaseModel):
    """One multiple-choice record as produced by the backend.

    The wire format uses ``correctAnswer``; both the alias and the field
    name are accepted.
    """

    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: list[str]
    correct_answer: int = Field(default=0, alias="correctAnswer", ge=0, le=3)
    explanation: str = ""

    @field_validator("options")
    @classmethod
    def _exactly_four_options(cls, value: list[str]) -> list[str]:
        if len(value) != 4:
            raise ValueError(f"expected 4 options, got {len(value)}")
        return value

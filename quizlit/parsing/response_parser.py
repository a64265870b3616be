"""Recovery and parsing of backend quiz output.

Backends tend to wrap JSON in markdown fences and to stop mid-array when
they hit their token limit. This module strips the fences, closes a
truncated array after the last complete object, and validates each record
on its own so one bad record does not discard the batch.
"""

import json
import logging

import pydantic

from quizlit.errors import MalformedResponseError
from quizlit.models.quiz import Provenance, Question, QuestionType
from quizlit.models.request import RawQuestionRecord
from quizlit.quality import contains_placeholder

logger = logging.getLogger(__name__)

MAX_RECORDS = 15


def normalize_response(raw: str) -> str:
    """Trim whitespace and strip a surrounding markdown code fence."""
    text = raw.strip()
    text = text.removeprefix("```json")
    text = text.removeprefix("```")
    text = text.removesuffix("```")
    return text.strip()


def repair_truncated(text: str) -> str:
    """Close a JSON array that was cut off mid-generation.

    Keeps everything up to the last complete object and appends ``]``.
    The partially written trailing object is discarded.

    Args:
        text: Normalized backend output.

    Returns:
        Text ending with the closing array bracket.

    Raises:
        MalformedResponseError: If no complete object can be located.
    """
    if text.endswith("]"):
        return text

    logger.warning("Response appears truncated, attempting to recover complete objects")

    # A complete object directly followed by a separator
    last_complete = text.rfind("},")
    if last_complete > 0:
        repaired = text[: last_complete + 1] + "\n]"
        logger.info("Recovered truncated JSON at last '},', new length: %d", len(repaired))
        return repaired

    # A final object with nothing opened after it
    last_brace = text.rfind("}")
    if last_brace > 0 and "{" not in text[last_brace:]:
        repaired = text[: last_brace + 1] + "\n]"
        logger.info("Recovered truncated JSON at last '}', new length: %d", len(repaired))
        return repaired

    raise MalformedResponseError("Truncated response contains no complete question object")


def parse_response(raw: str, max_records: int = MAX_RECORDS) -> list[RawQuestionRecord]:
    """Parse raw backend text into validated question records.

    Args:
        raw: Text returned by the backend.
        max_records: Maximum number of records to accept.

    Returns:
        Accepted records in their original order.

    Raises:
        MalformedResponseError: If the text cannot be decoded as a JSON
            array, or no record passes validation.
    """
    text = repair_truncated(normalize_response(raw))
    logger.debug("Parsing backend response (first 500 chars): %s", text[:500])

    try:
        items = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("JSON parse error: %s. Response was: %s", e, text[:1000])
        raise MalformedResponseError(f"Failed to parse JSON response: {e}") from e

    if not isinstance(items, list):
        raise MalformedResponseError(
            f"Expected a JSON array of questions, got {type(items).__name__}"
        )

    logger.info("Backend produced %d candidate questions", len(items))

    records: list[RawQuestionRecord] = []
    for i, item in enumerate(items, start=1):
        if len(records) >= max_records:
            break
        try:
            record = RawQuestionRecord.model_validate(item)
        except pydantic.ValidationError as e:
            logger.warning("Skipping question %d: %s", i, e.errors()[0]["msg"])
            continue
        if contains_placeholder(record.question) or any(
            contains_placeholder(option) for option in record.options
        ):
            logger.warning("Skipping question %d with placeholder text", i)
            continue
        records.append(record)

    if not records:
        raise MalformedResponseError(
            f"No valid questions found in response ({len(items)} candidates)"
        )

    logger.info("Parsed %d valid questions from backend response", len(records))
    return records


def to_questions(records: list[RawQuestionRecord]) -> list[Question]:
    """Convert backend records into multiple-choice questions."""
    return [
        Question(
            text=record.question,
            type=QuestionType.MULTIPLE_CHOICE,
            options=record.options,
            correct_answer_index=record.correct_answer,
            explanation=record.explanation,
            source=Provenance.BACKEND,
        )
        for record in records
    ]

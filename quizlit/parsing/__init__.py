"""Backend response recovery and parsing."""

from quizlit.parsing.response_parser import (
    normalize_response,
    parse_response,
    repair_truncated,
    to_questions,
)

__all__ = ["normalize_response", "parse_response", "repair_truncated", "to_questions"]

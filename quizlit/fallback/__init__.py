"""Rule-based question generation used when no backend is available."""

from quizlit.fallback.generator import RuleBasedGenerator
from quizlit.fallback.synthesis import (
    QuestionDraft,
    falsify_statement,
    make_multiple_choice,
    make_true_false,
)
from quizlit.fallback.text_analysis import (
    extract_concepts,
    extract_keywords,
    extract_sentences,
    filter_informative_sentences,
)
from quizlit.fallback.validation import is_valid_question

__all__ = [
    "QuestionDraft",
    "RuleBasedGenerator",
    "extract_concepts",
    "extract_keywords",
    "extract_sentences",
    "falsify_statement",
    "filter_informative_sentences",
    "is_valid_question",
    "make_multiple_choice",
    "make_true_false",
]

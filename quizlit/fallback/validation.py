"""Quality gate for rule-based question drafts."""

from quizlit.fallback.synthesis import QuestionDraft
from quizlit.models.quiz import QuestionType
from quizlit.quality import contains_placeholder

MIN_QUESTION_CHARS = 15


def is_valid_question(draft: QuestionDraft, source_text: str) -> bool:
    """Decide whether a draft is good enough to ship.

    Rejects short question text, multiple-choice drafts with fewer than
    four options or whose answer is not found in the source
    (case-insensitive), and anything carrying placeholder phrases.
    """
    if len(draft.text) < MIN_QUESTION_CHARS:
        return False

    if draft.type is QuestionType.MULTIPLE_CHOICE:
        if len(draft.options) < 4:
            return False
        if draft.answer and draft.answer.lower() not in source_text.lower():
            return False

    if contains_placeholder(draft.text):
        return False
    return not any(contains_placeholder(option) for option in draft.options)

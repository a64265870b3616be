"""Deterministic, offline quiz generation from lexical heuristics."""

import logging
import threading

from quizlit.errors import raise_if_cancelled
from quizlit.fallback.synthesis import QuestionDraft, make_multiple_choice, make_true_false
from quizlit.fallback.text_analysis import (
    extract_concepts,
    extract_keywords,
    extract_sentences,
    filter_informative_sentences,
)
from quizlit.fallback.validation import is_valid_question
from quizlit.models.quiz import Provenance, Question, QuestionType

logger = logging.getLogger(__name__)

DEFAULT_QUESTION_COUNT = 5


def draft_to_question(draft: QuestionDraft) -> Question:
    if draft.type is QuestionType.MULTIPLE_CHOICE:
        return Question(
            text=draft.text,
            type=draft.type,
            options=draft.options,
            correct_answer_index=draft.options.index(draft.answer),
            source=Provenance.RULE_BASED,
        )
    return Question(
        text=draft.text,
        type=draft.type,
        options=draft.options,
        correct_label=draft.answer,
        source=Provenance.RULE_BASED,
    )


class RuleBasedGenerator:
    """Builds multiple-choice and true/false questions without a backend.

    Generation never fails on content: it returns as many questions as
    pass the quality gate, possibly none. Slots alternate between
    multiple-choice (even) and true/false (odd); unused sentences are
    consumed first, then sentences are reused. At most twice the
    requested number of slots are attempted.
    """

    def generate(
        self,
        source_text: str,
        question_count: int,
        cancel_event: threading.Event | None = None,
    ) -> list[Question]:
        """Generate up to ``question_count`` questions from source_text.

        Args:
            source_text: Plain study text.
            question_count: Target number of questions (<= 0 means 5).
            cancel_event: Checked between pipeline stages.

        Returns:
            Accepted questions in generation order.
        """
        logger.info("Rule-based generation from %d characters", len(source_text))

        sentences = extract_sentences(source_text)
        keywords = extract_keywords(source_text)
        concepts = extract_concepts(source_text)
        logger.info(
            "Extracted %d sentences, %d keywords, %d concepts",
            len(sentences),
            len(keywords),
            len(concepts),
        )
        raise_if_cancelled(cancel_event, "rule-based text analysis")

        # Repeated sentences would only produce repeated questions
        candidates = list(dict.fromkeys(filter_informative_sentences(sentences, keywords)))
        logger.info("Filtered to %d informative sentences", len(candidates))
        if not candidates:
            logger.warning("No usable sentences found for question generation")
            return []

        target = question_count if question_count > 0 else DEFAULT_QUESTION_COUNT
        questions: list[Question] = []
        seen_texts: set[str] = set()
        next_unused = 0

        for slot in range(target * 2):
            if len(questions) >= target:
                break

            if next_unused < len(candidates):
                index = next_unused
                next_unused += 1
            else:
                index = slot % len(candidates)
            sentence = candidates[index]

            draft: QuestionDraft | None
            if slot % 2 == 0:
                draft = make_multiple_choice(
                    sentence, keywords, concepts, answer_position=slot // 2
                )
            else:
                draft = make_true_false(sentence, keywords)

            if draft is None or draft.text in seen_texts:
                logger.debug("Skipped slot %d for: %s", slot, sentence)
            elif is_valid_question(draft, source_text):
                seen_texts.add(draft.text)
                questions.append(draft_to_question(draft))
            else:
                logger.debug("Rejected slot %d draft for: %s", slot, sentence)

        raise_if_cancelled(cancel_event, "rule-based synthesis")
        logger.info("Rule-based generator produced %d/%d questions", len(questions), target)
        return questions

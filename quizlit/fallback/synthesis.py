"""Turns single sentences into multiple-choice and true/false drafts."""

from pydantic import BaseModel

from quizlit.fallback.text_analysis import WORD_PUNCTUATION
from quizlit.models.quiz import TRUE_FALSE_OPTIONS, QuestionType

BLANK = "____"
MAX_QUESTION_CHARS = 150
MIN_BLANK_CHARS = 5

MULTIPLE_CHOICE_PREFIX = "Complete the sentence: "
TRUE_FALSE_PREFIX = "True or False: "

GENERIC_OPTIONS = (
    "None of the above",
    "All of the above",
    "Cannot be determined",
    "Not specified",
)

# Words never worth blanking out (checked as substrings)
FILLER_TERMS = ("yang", "adalah", "merupakan", "which", "there", "their", "these", "those")

COPULAS = frozenset({"is", "are", "was", "were", "dapat", "adalah", "merupakan"})


class QuestionDraft(BaseModel):
    """A synthesized question that has not passed quality gating yet.

    ``answer`` is the correct option text for multiple-choice drafts and
    the "True"/"False" label for true/false drafts.
    """

    text: str
    type: QuestionType
    options: list[str]
    answer: str


def _truncate(text: str) -> str:
    if len(text) > MAX_QUESTION_CHARS:
        return text[: MAX_QUESTION_CHARS - 3] + "..."
    return text


def blank_answer(
    sentence: str, keywords: list[str], concepts: list[str]
) -> tuple[str, str] | None:
    """Blank out the term a multiple-choice question will ask for.

    Tries, in order: the first word matching a keyword (longer than 4
    characters), the first concept appearing verbatim, then a
    non-filler middle word longer than 4 characters.

    Returns:
        ``(blanked_sentence, answer)``, or None if nothing qualifies.
    """
    words = sentence.split()
    lowered_keywords = {keyword.lower() for keyword in keywords}

    for i, word in enumerate(words):
        cleaned = word.strip(WORD_PUNCTUATION)
        if len(cleaned) >= MIN_BLANK_CHARS and cleaned.lower() in lowered_keywords:
            blanked = words[:i] + [word.replace(cleaned, BLANK, 1)] + words[i + 1 :]
            return " ".join(blanked), cleaned

    for concept in concepts:
        if concept in sentence:
            return sentence.replace(concept, BLANK, 1), concept

    if len(words) > 5:
        for i in range(2, len(words) - 2):
            cleaned = words[i].strip(WORD_PUNCTUATION)
            lowered = cleaned.lower()
            if len(cleaned) >= MIN_BLANK_CHARS and not any(
                term in lowered for term in FILLER_TERMS
            ):
                blanked = words[:i] + [words[i].replace(cleaned, BLANK, 1)] + words[i + 1 :]
                return " ".join(blanked), cleaned

    return None


def build_options(answer: str, keywords: list[str], concepts: list[str]) -> list[str]:
    """Answer first, then keyword, concept and generic distractors; 4 total."""
    options = [answer]
    used = {answer.lower()}

    for keyword in keywords:
        if len(options) >= 4:
            break
        if keyword.lower() not in used and len(keyword) > 3:
            options.append(keyword)
            used.add(keyword.lower())

    for concept in concepts:
        if len(options) >= 4:
            break
        lowered = concept.lower()
        if lowered not in used and answer.lower() not in lowered:
            options.append(concept)
            used.add(lowered)

    for generic in GENERIC_OPTIONS:
        if len(options) >= 4:
            break
        options.append(generic)

    return options[:4]


def make_multiple_choice(
    sentence: str,
    keywords: list[str],
    concepts: list[str],
    answer_position: int = 0,
) -> QuestionDraft | None:
    """Build a fill-the-gap multiple-choice draft from a sentence.

    ``answer_position`` selects where the correct option is placed, so
    the answer does not always sit in the same slot.
    """
    blanked = blank_answer(sentence, keywords, concepts)
    if blanked is None:
        return None
    question_text, answer = blanked

    options = build_options(answer, keywords, concepts)
    distractors = options[1:]
    pos = answer_position % len(options)
    options = distractors[:pos] + [answer] + distractors[pos:]

    return QuestionDraft(
        text=MULTIPLE_CHOICE_PREFIX + _truncate(question_text),
        type=QuestionType.MULTIPLE_CHOICE,
        options=options,
        answer=answer,
    )


def falsify_statement(sentence: str, keywords: list[str]) -> tuple[str, str]:
    """Try to turn a true statement into a false one.

    First swaps one keyword for the next keyword in the ranked list,
    then falls back to inserting "not" after the first copula. If
    neither applies the sentence is returned unchanged.

    Returns:
        ``(statement, label)`` where label is "True" or "False".
    """
    words = sentence.split()

    for i, word in enumerate(words):
        cleaned = word.strip(WORD_PUNCTUATION)
        lowered = cleaned.lower()
        if not lowered:
            continue
        for j, keyword in enumerate(keywords):
            if lowered != keyword.lower() or j + 1 >= len(keywords):
                continue
            replacement = keywords[j + 1]
            if replacement.lower() != lowered:
                swapped = words[:i] + [word.replace(cleaned, replacement, 1)] + words[i + 1 :]
                return " ".join(swapped), "False"

    for i in range(1, len(words) - 1):
        cleaned = words[i].strip(WORD_PUNCTUATION)
        if cleaned.lower() in COPULAS:
            negated = words[:i] + [words[i].replace(cleaned, f"{cleaned} not", 1)] + words[i + 1 :]
            return " ".join(negated), "False"

    return sentence, "True"


def make_true_false(sentence: str, keywords: list[str]) -> QuestionDraft:
    statement, label = falsify_statement(sentence, keywords)
    return QuestionDraft(
        text=TRUE_FALSE_PREFIX + _truncate(statement),
        type=QuestionType.TRUE_FALSE,
        options=list(TRUE_FALSE_OPTIONS),
        answer=label,
    )
